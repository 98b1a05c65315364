import pygame
import pytest

from fractalviewer.cli import build_parser, main


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert (args.width, args.height) == (800, 600)
    assert args.max_iter == 800
    assert args.escape_radius == 2.0
    assert args.snapshot is None
    assert args.julia is None


def test_headless_snapshot(tmp_path):
    out = tmp_path / "mandel.png"
    assert main(["--snapshot", str(out), "--width", "24", "--height", "18",
                 "--max-iter", "60"]) == 0
    assert pygame.image.load(str(out)).get_size() == (24, 18)


def test_headless_julia_snapshot(tmp_path):
    out = tmp_path / "julia.png"
    assert main(["--snapshot", str(out), "--width", "10", "--height", "10",
                 "--max-iter", "30", "--julia", "-0.8", "0.156"]) == 0
    assert out.exists()


@pytest.mark.parametrize("argv", [
    ["--julia", "0.1", "0.2"],
    ["--width", "1", "--snapshot", "x.png"],
    ["--max-iter", "0", "--snapshot", "x.png"],
    ["--escape-radius", "-1", "--snapshot", "x.png"],
])
def test_invalid_options_exit(argv):
    with pytest.raises(SystemExit):
        main(argv)
