"""Tests for the demo entry point in taskline/__main__.py."""

from taskline.__main__ import demo, main
from taskline.config import DisplayConfig
from taskline.tasks import TaskDisplay

# The last end resolves "build", six rows above the cursor, so the cursor
# is restored before the final newline.
LAST_LINE = "build finished with warnings\x1b[u\n"


def test_demo_leaves_stack_empty(stream):
    display = TaskDisplay(stream, DisplayConfig(animate=False))
    demo(display, 0)
    out = stream.getvalue()
    assert display.depth == 0
    assert out.endswith(LAST_LINE)
    assert out.index("compile done") < out.index("2 of 40 tests failed")


def test_demo_resolves_build_in_place(stream):
    display = TaskDisplay(stream, DisplayConfig(animate=False))
    demo(display, 0)
    assert "\x1b[s\x1b[6A\x1b[1G\x1b[33;1m⚠\x1b[0m \x1b[K" + LAST_LINE in stream.getvalue()


def test_main_writes_to_stdout(capsys, tmp_path):
    config = tmp_path / "config.yaml"
    config.write_text("animate: false\n")
    main(["--pause", "0", "--config", str(config)])
    assert capsys.readouterr().out.endswith(LAST_LINE)
