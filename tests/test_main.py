import pytest

from sphereview.main import main, parse_args


def test_defaults():
    args = parse_args([])
    assert (args.width, args.height, args.title) == (1920, 1080, "my title")


def test_custom_values():
    args = parse_args(["--width", "640", "--height", "480", "--title", "demo"])
    assert (args.width, args.height, args.title) == (640, 480, "demo")


@pytest.mark.parametrize("argv", [["--width", "0"], ["--height", "-3"], ["--width", "wide"]])
def test_parse_args_rejects_bad_sizes(argv):
    with pytest.raises(SystemExit):
        parse_args(argv)


def test_main_rejects_bad_arguments():
    with pytest.raises(SystemExit) as info:
        main(["--height", "0"])
    assert info.value.code == 2


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit) as info:
        main(["--fullscreen"])
    assert info.value.code == 2