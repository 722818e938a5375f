import pytest

from hcal.options import Options
from hcal.optionspec import OptionError, OptionType


def make(argv):
    opts = Options(argv)
    opts.define("a|all=b", "show all")
    opts.define("b=b")
    opts.define("n|number=i:3", "a count")
    opts.define("x|scale=d:1.5")
    opts.define("name=s:default")
    opts.define("c=c")
    return opts


def test_define_returns_positions():
    opts = Options(["prog"])
    assert opts.define("alpha=b") == 0
    assert opts.define("beta|B=s:hi") == 1
    assert opts.is_defined("B")
    assert not opts.is_defined("gamma")
    assert opts.definition("B") == "beta|B=s:hi"
    assert opts.definition("gamma") == ""


def test_duplicate_alias_rejected():
    opts = Options(["prog"])
    opts.define("alpha|a=b")
    with pytest.raises(OptionError):
        opts.define("a|other=b")


def test_bad_definition_propagates():
    opts = Options(["prog"])
    with pytest.raises(OptionError):
        opts.define("noequals")
    with pytest.raises(OptionError):
        opts.define("z=q")


def test_defaults_when_not_given():
    opts = make(["prog"])
    opts.process()
    assert not opts.boolean("all")
    assert opts.string("name") == "default"
    assert opts.integer("n") == 3
    assert opts.floating("scale") == 1.5
    assert opts.argument_count() == 0


def test_bundled_short_booleans_and_value():
    opts = make(["prog", "-ab", "-n7", "file"])
    opts.process()
    assert opts.boolean("a") and opts.boolean("all")
    assert opts.boolean("b")
    assert opts.integer("number") == 7
    assert opts.arguments() == ["prog", "file"]


def test_short_value_in_next_word():
    opts = make(["prog", "-an", "12", "rest"])
    opts.process()
    assert opts.boolean("all")
    assert opts.integer("n") == 12
    assert opts.argument(1) == "rest"


def test_long_forms():
    opts = make(["prog", "--name=bob", "--number", "5", "--all"])
    opts.process()
    assert opts.string("name") == "bob"
    assert opts.integer("n") == 5
    assert opts.boolean("a")


def test_long_empty_value_takes_next_word():
    opts = make(["prog", "--name=", "carol"])
    opts.process()
    assert opts.string("name") == "carol"
    assert opts.argument_count() == 0


def test_double_dash_ends_options():
    opts = make(["prog", "one", "--", "-a", "--name=z"])
    opts.process()
    assert opts.arguments() == ["prog", "one", "-a", "--name=z"]
    assert not opts.boolean("a")


def test_single_dash_is_argument():
    opts = make(["prog", "-"])
    opts.process()
    assert opts.arguments() == ["prog", "-"]


def test_missing_parameter():
    opts = make(["prog", "-n"])
    with pytest.raises(OptionError):
        opts.process()


def test_boolean_with_value_rejected():
    opts = make(["prog", "--all=yes"])
    with pytest.raises(OptionError):
        opts.process()


def test_unknown_option_errors():
    opts = make(["prog", "--bogus"])
    with pytest.raises(OptionError):
        opts.process()


def test_unknown_option_ignored_without_error_check():
    opts = make(["prog", "--bogus", "-q", "arg"])
    opts.process(error_check=False)
    assert opts.arguments() == ["prog", "arg"]
    assert opts.string("bogus") == "UNKNOWN OPTION"
    assert opts.boolean("bogus") is False
    assert opts.option_type("bogus") is None


def test_suppressed_options_word():
    opts = make(["prog", "--options", "x"])
    opts.process(suppress=True)
    assert opts.options_requested
    assert opts.arguments() == ["prog", "x"]


def test_options_word_prints_help_and_exits(capsys):
    opts = make(["prog", "--options"])
    with pytest.raises(SystemExit) as info:
        opts.process()
    assert info.value.code == 0
    assert "a|all=b\tshow all\n" in capsys.readouterr().out


def test_integer_prefixes():
    opts = make(["prog"])
    opts.process()
    opts.set_modified("n", "0x1F")
    assert opts.integer("n") == 31
    opts.set_modified("n", "010")
    assert opts.integer("n") == 8
    opts.set_modified("n", "-42abc")
    assert opts.integer("n") == -42
    opts.set_modified("n", "abc")
    assert opts.integer("n") == 0


def test_floating_and_char():
    opts = make(["prog", "-x", "2.5e1junk", "-c", "hello"])
    opts.process()
    assert opts.floating("x") == 2.5e1
    assert opts.char("c") == "h"
    opts.set_modified("c", "")
    assert opts.char("c") == ""


def test_option_types():
    opts = make(["prog"])
    opts.process()
    assert opts.option_type("all") is OptionType.BOOLEAN
    assert opts.option_type("number") is OptionType.INT
    assert opts.option_type("name") is OptionType.STRING


def test_command_and_command_line():
    opts = make(["prog", "-a", "file"])
    assert opts.command() == ""
    opts.process()
    assert opts.command() == "prog"
    assert opts.command_line() == "prog -a file"


def test_append_and_append_string():
    opts = make(["prog"])
    opts.append(["-a"])
    opts.append_string("--name 'two words' tail")
    opts.process()
    assert opts.boolean("all")
    assert opts.string("name") == "two words"
    assert opts.arguments() == ["prog", "tail"]


def test_set_arguments_replaces():
    opts = make(["old", "-a"])
    opts.set_arguments(["new", "x"])
    opts.process()
    assert opts.command() == "new"
    assert not opts.boolean("a")


def test_argument_out_of_range():
    opts = make(["prog", "one"])
    opts.process()
    assert opts.argument(0) == "prog"
    with pytest.raises(IndexError):
        opts.argument(2)
    with pytest.raises(IndexError):
        opts.argument(-1)


def test_process_needs_command_line():
    with pytest.raises(OptionError):
        Options().process()


def test_format_help_lists_definitions_in_order():
    opts = Options(["prog"])
    opts.define("alpha=b", "first")
    opts.define("beta=s:x")
    assert opts.format_help() == "alpha=b\tfirst\nbeta=s:x\t\n"


def test_custom_flag():
    opts = Options(["prog", "/a", "-a"], flag="/")
    opts.define("a=b")
    opts.process()
    assert opts.boolean("a")
    assert opts.arguments() == ["prog", "-a"]