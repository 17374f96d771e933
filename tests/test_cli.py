import pytest

from detnms import __version__
from detnms.cli import main, parse_args
from detnms.config import BenchmarkConfig


def test_cli_defaults():
    config = parse_args([])

    assert config.frames == 100
    assert config.seed is None
    assert config.verbose is False
    assert config.suppression.iou_threshold == 0.45
    assert config.suppression.num_classes == 80
    assert config.suppression.max_detections is None
    assert config.synthetic.width == 416


def test_cli_parses_suppression_flags():
    config = parse_args(
        [
            "--iou",
            "0.6",
            "--num-classes",
            "20",
            "--score-threshold",
            "0.25",
            "--max-detections",
            "50",
            "--workers",
            "4",
            "--seed",
            "7",
            "-v",
        ]
    )

    assert config.suppression.iou_threshold == 0.6
    assert config.suppression.num_classes == 20
    assert config.suppression.score_threshold == 0.25
    assert config.suppression.max_detections == 50
    assert config.suppression.workers == 4
    assert config.seed == 7
    assert config.verbose is True


@pytest.mark.parametrize(
    "args",
    [
        ["--iou", "1.5"],
        ["--iou", "-0.1"],
        ["--num-classes", "0"],
        ["--frames", "0"],
        ["--workers", "0"],
        ["--max-detections", "-3"],
    ],
)
def test_cli_rejects_invalid_values(args):
    with pytest.raises(SystemExit):
        parse_args(args)


def test_cli_version(capsys):
    with pytest.raises(SystemExit) as exc:
        parse_args(["-V"])
    assert exc.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_main_runs_benchmark(capsys):
    code = main(["--frames", "2", "--candidates", "20", "--num-classes", "3", "--seed", "0"])

    assert code == 0
    out = capsys.readouterr().out
    assert "Frames processed: 2" in out


def test_cli_reports_config_error_message(capsys):
    with pytest.raises(SystemExit) as exc:
        parse_args(["--iou", "1.5"])
    assert exc.value.code == 2
    assert "iou_threshold must be between 0.0 and 1.0" in capsys.readouterr().err


def test_benchmark_config_rejects_zero_frames():
    with pytest.raises(ValueError, match="frames"):
        BenchmarkConfig(frames=0)
