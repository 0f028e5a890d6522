"""Tests for the command-line interface and environment configuration.

WHY: The CLI is how editors run the styler by hand. Exit codes and error
messages must be reliable enough to script against.

HOW: FFmpegConverter is monkeypatched in the cli module with a
FakeConverter so no ffmpeg is needed. main() always exits, so tests
catch SystemExit and inspect the code and stderr.
"""

import pytest

from subtitle_styler import cli
from subtitle_styler.config import load_convert_timeout


@pytest.fixture
def patched_converter(monkeypatch, fake_converter):
    """Route the CLI's converter construction to the fake converter."""
    built = {}

    def factory(binary, timeout_s):
        built["binary"] = binary
        built["timeout_s"] = timeout_s
        return fake_converter

    monkeypatch.setattr(cli, "FFmpegConverter", factory)
    return built


def _run_main(argv):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(argv)
    return excinfo.value.code


class TestBuildParser:
    """build_parser() defines the documented flags."""

    def test_resolution_is_required(self):
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args(["in.srt"])

    def test_overrides_are_typed(self):
        args = cli.build_parser().parse_args([
            "in.srt", "--resolution", "1080x1920",
            "--font-size", "24", "--font-weight", "700", "--text-height", "80",
        ])
        assert args.font_size == 24
        assert args.font_weight == 700
        assert args.text_height == "80"


class TestMain:
    """main() renders the ASS file and exits with a status code."""

    def test_writes_ass_next_to_input(self, tmp_path, sample_srt, patched_converter, fake_converter):
        srt = tmp_path / "clip.srt"
        srt.write_text(sample_srt, encoding="utf-8")

        code = _run_main([str(srt), "--resolution", "1080x1920", "--font-name", "Inter", "--timeout", "12"])

        assert code == 0
        ass = (tmp_path / "clip.ass").read_text(encoding="utf-8")
        assert "Style: Default,Inter,16," in ass
        assert "PlayResX: 249" in ass
        assert fake_converter.checked
        assert patched_converter["timeout_s"] == 12.0

    def test_explicit_output(self, tmp_path, sample_srt, patched_converter):
        srt = tmp_path / "clip.srt"
        srt.write_text(sample_srt, encoding="utf-8")
        out = tmp_path / "styled.ass"

        assert _run_main([str(srt), "--resolution", "1920x1080", "--output", str(out)]) == 0
        assert "PlayResX: 443" in out.read_text(encoding="utf-8")

    def test_missing_input(self, tmp_path, patched_converter, capsys):
        assert _run_main([str(tmp_path / "nope.srt"), "--resolution", "1920x1080"]) == 1
        assert "File not found" in capsys.readouterr().err

    def test_bad_resolution(self, tmp_path, sample_srt, patched_converter, capsys):
        srt = tmp_path / "clip.srt"
        srt.write_text(sample_srt, encoding="utf-8")
        assert _run_main([str(srt), "--resolution", "1920by1080"]) == 1
        assert "videoResolution" in capsys.readouterr().err

    def test_conversion_failure(self, tmp_path, sample_srt, monkeypatch, failing_converter, capsys):
        monkeypatch.setattr(cli, "FFmpegConverter", lambda binary, timeout_s: failing_converter)
        srt = tmp_path / "clip.srt"
        srt.write_text(sample_srt, encoding="utf-8")

        assert _run_main([str(srt), "--resolution", "1920x1080"]) == 1
        assert "Invalid data found when processing input" in capsys.readouterr().err
        assert not (tmp_path / "clip.ass").exists()

    @pytest.mark.parametrize("value", ["0", "-5"])
    def test_non_positive_timeout_rejected(self, tmp_path, sample_srt, patched_converter, fake_converter, capsys, value):
        srt = tmp_path / "clip.srt"
        srt.write_text(sample_srt, encoding="utf-8")

        assert _run_main([str(srt), "--resolution", "1920x1080", "--timeout", value]) == 1
        assert "--timeout must be positive" in capsys.readouterr().err
        assert patched_converter == {}
        assert fake_converter.received == []


class TestLoadConvertTimeout:
    """load_convert_timeout() reads CONVERT_TIMEOUT_S."""

    def test_unset(self, monkeypatch):
        monkeypatch.delenv("CONVERT_TIMEOUT_S", raising=False)
        assert load_convert_timeout() is None

    def test_value(self, monkeypatch):
        monkeypatch.setenv("CONVERT_TIMEOUT_S", "45")
        assert load_convert_timeout() == 45.0

    @pytest.mark.parametrize("value", ["soon", "0", "-3"])
    def test_invalid(self, monkeypatch, value):
        monkeypatch.setenv("CONVERT_TIMEOUT_S", value)
        with pytest.raises(ValueError, match="CONVERT_TIMEOUT_S"):
            load_convert_timeout()
