import json
import logging

import numpy as np

from flatobj.cli import get_limits, get_parser, main

TRIANGLE = (
    "v 0.0 0.0 0.0\n"
    "v 1.0 0.0 0.0\n"
    "v 0.0 1.0 0.0\n"
    "vn 0.0 0.0 1.0\n"
    "vt 0.0 0.0\n"
    "vt 1.0 0.0\n"
    "vt 0.0 1.0\n"
    "f 1/1/1 2/2/1 3/3/1\n"
)


def test_limits_from_config_and_flags(tmp_path):
    config = tmp_path / "limits.yaml"
    config.write_text("max_vertices: 10\nmax_normals: 5\nmax_indices: 30\n")
    args = get_parser().parse_args(
        ["a.obj", "--config", str(config), "--max-normals", "7"]
    )
    limits = get_limits(args)
    assert limits.as_dict() == {
        "max_vertices": 10,
        "max_normals": 7,
        "max_indices": 30,
        "max_texcoords": 30,
    }


def test_main_exports(tmp_path, capsys):
    obj = tmp_path / "triangle.obj"
    obj.write_text(TRIANGLE)
    out_dir = tmp_path / "out"
    code = main([str(obj), "--max-indices", "3", "--out-dir", str(out_dir)])
    assert code == 0
    assert "1 triangles, 3 corners" in capsys.readouterr().out
    with np.load(str(out_dir / "triangle.npz")) as data:
        assert data["positions"].shape == (9,)
    with open(str(out_dir / "args.json")) as f:
        assert json.load(f)["max_indices"] == 3


def test_main_reports_failures(tmp_path, caplog):
    good = tmp_path / "good.obj"
    good.write_text(TRIANGLE)
    bad = tmp_path / "bad.obj"
    bad.write_text(TRIANGLE + "f 1/1/1 2/2/1 3/3/1 1/1/1\n")
    with caplog.at_level(logging.ERROR, logger="flatobj"):
        code = main([str(good), str(bad), "--max-indices", "6"])
    assert code == 1
    assert "bad.obj" in caplog.text
    assert "non-triangulated" in caplog.text


def test_main_bad_config(tmp_path):
    config = tmp_path / "limits.yaml"
    config.write_text("max_vertices: -1\n")
    assert main(["a.obj", "--config", str(config)]) == 2


def test_main_counts_export_failures(tmp_path, caplog):
    blocked = tmp_path / "blocked.obj"
    blocked.write_text(TRIANGLE)
    good = tmp_path / "good.obj"
    good.write_text(TRIANGLE)
    out_dir = tmp_path / "out"
    # A directory where the export file should go makes the write fail.
    (out_dir / "blocked.npz").mkdir(parents=True)
    with caplog.at_level(logging.ERROR, logger="flatobj"):
        code = main(
            [str(blocked), str(good), "--max-indices", "3", "--out-dir", str(out_dir)]
        )
    assert code == 1
    assert "Failed to write" in caplog.text
    assert (out_dir / "good.npz").is_file()
