import pandas as pd

from sweepslicer.cli import main

TRIANGLE = [[(0, 0, 0), (10, 0, 0), (5, 10, 10)]]


def test_cli_writes_xyz_to_stdout(write_stl, capsys):
    path = write_stl(TRIANGLE)
    assert main([str(path), "--z-min", "0", "--z-max", "10", "--slices", "2", "--no-progress"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert sorted(lines) == ["2.5 5 5", "7.5 5 5"]


def test_cli_writes_csv_file(write_stl, tmp_path):
    path = write_stl(TRIANGLE)
    target = tmp_path / "out.csv"
    code = main([str(path), "--z-min", "0", "--z-max", "10", "-n", "4", "-f", "csv", "-o", str(target), "--no-progress"])
    assert code == 0
    df = pd.read_csv(target)
    assert df["z"].tolist() == [2.5, 5.0, 7.5]


def test_cli_auto_bounds(write_stl, capsys):
    path = write_stl(TRIANGLE)
    assert main([str(path), "--auto-bounds", "-n", "2", "--no-progress"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert all(line.endswith(" 5") for line in lines)


def test_cli_default_bounds_include_mesh(write_stl, capsys):
    path = write_stl(TRIANGLE)
    assert main([str(path), "--no-progress"]) == 0
    lines = capsys.readouterr().out.splitlines()
    # defaults: 200 slices over [-10, 100), step 0.55; slices in (0, 10] cut the facet
    assert len(lines) == 2 * 18


def test_cli_missing_file(tmp_path, caplog):
    assert main([str(tmp_path / "nope.stl"), "--no-progress"]) == 1
    assert "File not found" in caplog.text


def test_cli_rejects_binary_stl(tmp_path):
    path = tmp_path / "binary.stl"
    path.write_bytes(b"\x00" * 84)
    assert main([str(path), "--no-progress"]) == 1


def test_cli_rejects_bad_slice_count(write_stl):
    path = write_stl(TRIANGLE)
    assert main([str(path), "--slices", "0", "--no-progress"]) == 1


def test_cli_bad_parameters_leave_output_untouched(write_stl, tmp_path):
    path = write_stl(TRIANGLE)
    fresh = tmp_path / "fresh.xyz"
    assert main([str(path), "--slices", "0", "-o", str(fresh), "--no-progress"]) == 1
    assert not fresh.exists()

    existing = tmp_path / "existing.xyz"
    existing.write_text("keep me\n")
    assert main([str(path), "--z-min", "5", "--z-max", "1", "-o", str(existing), "--no-progress"]) == 1
    assert existing.read_text() == "keep me\n"
