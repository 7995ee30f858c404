from knob import Settings, optflag, optflagopt, optmulti, optopt, reqopt
from knob.arguments import format_option_row


def test_usage() -> None:
    settings = Settings()
    settings.opt(reqopt("p", "port", "The port to bind to", "eg: 4000"))
    usage = settings.usage("this is how it works")

    assert "this is how it works" in usage
    assert "--port" in usage


def test_usage_has_one_line_per_option() -> None:
    settings = Settings()
    settings.opt(optopt("p", "port", "the port to bind to", "4000"))
    settings.opt(optopt("e", "environment", "the environment\nto run in", ""))
    settings.opt(optflag("v", "", "verbose"))
    settings.opt(optflagopt("", "color", "", "WHEN"))

    lines = settings.usage("Try one of these:").splitlines()
    assert lines[:3] == ["Try one of these:", "", "Options:"]
    assert len(lines) == 3 + len(settings.options)
    assert lines[4].endswith("the environment to run in")


def test_usage_without_options() -> None:
    assert Settings().usage("brief").splitlines() == ["brief", "", "Options:"]


def test_option_row_layout() -> None:
    assert format_option_row(optopt("p", "port", "the port", "4000")) == (
        "    -p, --port 4000     the port"
    )
    assert format_option_row(optflag("v", "", "verbose")) == "    -v                  verbose"
    assert format_option_row(optflagopt("", "color", "", "WHEN")) == "    --color [WHEN]"


def test_long_row_keeps_description_on_same_line() -> None:
    row = format_option_row(optopt("", "a-very-long-option-name", "desc", "VALUE"))
    assert row == "    --a-very-long-option-name VALUE  desc"


def test_short_usage() -> None:
    settings = Settings()
    settings.opt(reqopt("p", "port", "port", "4000"))
    settings.opt(optopt("e", "environment", "env", "ENV"))
    settings.opt(optflag("v", "verbose", "verbose"))
    settings.opt(optmulti("I", "include", "include", "DIR"))

    assert settings.short_usage("prog") == "Usage: prog -p 4000 [-e ENV] [-v] [-I DIR].."


def test_hint_whitespace_stays_on_one_line() -> None:
    settings = Settings()
    settings.opt(optopt("p", "port", "the port", "a\nb"))
    settings.opt(optflagopt("c", "color", "colorize", "WHEN\tNEEDED"))

    lines = settings.usage("brief").splitlines()
    assert len(lines) == 3 + len(settings.options)
    assert lines[3] == "    -p, --port a b      the port"
    assert "[WHEN NEEDED]" in lines[4]
    assert "\n" not in settings.short_usage("prog")
