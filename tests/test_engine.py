"""
YAMLSTEP ENGINE TESTS
---------------------
File-level orchestration: BOM handling, discovery, error reports, summary.
"""

from yamlstep.core.engine import ValidationEngine


def test_check_text_report():
    engine = ValidationEngine(".")
    report = engine.check_text("a: 1\n", source="inline")
    assert report["file_path"] == "inline"
    assert report["success"] is True
    assert report["status"] == "VALID"
    assert len(report["records"]) == 1


def test_check_file_strips_bom(tmp_path):
    (tmp_path / "bom.yaml").write_bytes("\ufeffa: 1\nb:\n  - x\n".encode("utf-8"))
    report = ValidationEngine(str(tmp_path)).check_file("bom.yaml")
    assert report["success"] is True
    assert report["message"] == ""


def test_check_file_invalid(tmp_path):
    (tmp_path / "bad.yaml").write_text("a: -x\n", encoding="utf-8")
    report = ValidationEngine(str(tmp_path)).check_file("bad.yaml")
    assert report["status"] == "INVALID"
    assert "Inline sequences" in report["message"]


def test_missing_file_is_a_report_not_an_exception(tmp_path):
    report = ValidationEngine(str(tmp_path)).check_file("nope.yaml")
    assert report["status"] == "FILE_NOT_FOUND"
    assert report["success"] is False


def test_undecodable_file(tmp_path):
    (tmp_path / "binary.yaml").write_bytes(b"\xff\xfe\xfa\x00")
    report = ValidationEngine(str(tmp_path)).check_file("binary.yaml")
    assert report["status"] == "ENGINE_ERROR"


def test_scan_directory_and_summary(tmp_path):
    (tmp_path / "good.yaml").write_text("a: 1\n", encoding="utf-8")
    (tmp_path / "nested").mkdir()
    (tmp_path / "nested" / "bad.yml").write_text("@@@\n", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("@@@\n", encoding="utf-8")
    (tmp_path / "node_modules").mkdir()
    (tmp_path / "node_modules" / "dep.yaml").write_text("@@@\n", encoding="utf-8")
    (tmp_path / ".yamlstep.yaml").write_text("trace:\n  show_edges: false\n", encoding="utf-8")

    engine = ValidationEngine(str(tmp_path))
    progress = []
    reports = engine.scan_directory(progress_callback=lambda done, total: progress.append((done, total)))

    paths = sorted(r["file_path"].replace("\\", "/") for r in reports)
    assert paths == ["good.yaml", "nested/bad.yml"]
    assert progress[-1] == (2, 2)

    summary = engine.generate_summary(reports)
    assert summary["total_files"] == 2
    assert summary["valid"] == 1
    assert summary["invalid"] == 1
    assert summary["system_errors"] == 0


def test_scan_directory_extension_override(tmp_path):
    (tmp_path / "a.yaml").write_text("a: 1\n", encoding="utf-8")
    (tmp_path / "b.conf").write_text("b: 1\n", encoding="utf-8")
    reports = ValidationEngine(str(tmp_path)).scan_directory(extensions=[".conf"])
    assert [r["file_path"] for r in reports] == ["b.conf"]


def test_empty_summary():
    summary = ValidationEngine(".").generate_summary([])
    assert summary["total_files"] == 0
