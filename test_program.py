import matplotlib
matplotlib.use("Agg")

import pytest

from geometry import Point
from jarvis_march import InvalidInputError
from program import DISTRIBUTIONS, generate_random_points, load_points, main


@pytest.fixture
def square_file(tmp_path):
    path = tmp_path / "square.txt"
    path.write_text("5\n0 0\n0 2\n2 2\n2 0\n1 1\n", encoding="utf-8")
    return path


def test_load_points_with_count_header(square_file):
    points = load_points(str(square_file))
    assert points == [Point(0, 0), Point(0, 2), Point(2, 2), Point(2, 0), Point(1, 1)]


def test_load_points_csv(tmp_path):
    path = tmp_path / "points.csv"
    path.write_text("0.5,1\n-2,3.25\n\n4,4\n", encoding="utf-8")
    assert load_points(str(path)) == [Point(0.5, 1), Point(-2, 3.25), Point(4, 4)]


def test_load_points_empty(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")
    assert load_points(str(path)) == []

    path.write_text("0\n", encoding="utf-8")
    assert load_points(str(path)) == []


@pytest.mark.parametrize(
    "content",
    [
        "3\n0 0\n1 1\n",
        "x\n0 0\n",
        "0 0 1\n1 1 2\n",
        "0 0\n1 a\n",
    ],
)
def test_load_points_malformed(tmp_path, content):
    path = tmp_path / "bad.txt"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(InvalidInputError):
        load_points(str(path))


@pytest.mark.parametrize("distribution", DISTRIBUTIONS)
def test_generate_random_points(distribution):
    points = generate_random_points(50, distribution, seed=1)
    assert len(points) == 50
    assert points == generate_random_points(50, distribution, seed=1)


def test_generate_unknown_distribution():
    with pytest.raises(InvalidInputError):
        generate_random_points(10, "spiral")


def test_main_prints_hull(square_file, capsys):
    assert main([str(square_file)]) == 0
    assert capsys.readouterr().out.split("\n")[:-1] == ["0 0", "0 2", "2 2", "2 0"]


def test_main_prints_x_only(square_file, capsys):
    assert main([str(square_file), "--x-only"]) == 0
    assert capsys.readouterr().out.split() == ["0", "0", "2", "2"]


def test_main_saves_plot(tmp_path, capsys):
    output = tmp_path / "hull.png"
    assert main(["--generate", "100", "--distribution", "circle", "--output", str(output)]) == 0
    assert output.exists() and output.stat().st_size > 0
    assert len(capsys.readouterr().out.split("\n")) > 3


@pytest.mark.parametrize("flag", [["--plot"], ["--output", "hull.png"]])
def test_x_only_rejects_plotting(square_file, flag, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main([str(square_file), "--x-only", *flag])
    assert exc_info.value.code == 2
    assert "--x-only cannot be combined" in capsys.readouterr().err


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "missing.txt")]) == 1
