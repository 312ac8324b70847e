"""解析结果读取 / 视图写出测试"""

import json

import pytest

from hiring_insight.aggregation import aggregate, empty_result
from hiring_insight.config import AggregationConfig
from hiring_insight.exceptions import OutputWriteError, SourceFileError
from hiring_insight.models import ParsedIssue
from hiring_insight.storage import (
    load_all_postings,
    load_parsed_issue,
    read_source_file,
    save_parsed_issue,
    write_views,
)


class TestLoadAllPostings:
    """load_all_postings 测试"""

    def test_loads_postings_from_all_files(self, parsed_dir, write_issue, sample_posting_dict):
        second = dict(sample_posting_dict, id="1235-1", issueNumber=1235, commentId=1)
        write_issue(1234, [sample_posting_dict])
        write_issue(1235, [second])

        postings = load_all_postings(parsed_dir)

        assert [p.id for p in postings] == ["1234-5678", "1235-1"]
        assert postings[0].company == "字节跳动"
        assert postings[0].location == ["北京", "上海"]

    def test_missing_directory_returns_empty(self, tmp_path):
        assert load_all_postings(tmp_path / "does-not-exist") == []

    def test_empty_directory_returns_empty(self, parsed_dir):
        assert load_all_postings(parsed_dir) == []

    def test_corrupt_file_skipped(self, parsed_dir, write_issue, sample_posting_dict):
        write_issue(1234, [sample_posting_dict])
        (parsed_dir / "9999.json").write_text("{not json", encoding="utf-8")
        (parsed_dir / "9998.json").write_text("[1, 2]", encoding="utf-8")

        postings = load_all_postings(parsed_dir)

        assert [p.id for p in postings] == ["1234-5678"]

    def test_invalid_record_skipped_rest_kept(self, parsed_dir, write_issue, sample_posting_dict):
        broken = dict(sample_posting_dict, id="1234-1", issueNumber="not-a-number")
        ok = dict(sample_posting_dict, id="1234-2", commentId=2)
        write_issue(1234, [broken, "garbage", ok])

        postings = load_all_postings(parsed_dir)

        assert [p.id for p in postings] == ["1234-2"]

    def test_duplicate_ids_first_wins(self, parsed_dir, write_issue, sample_posting_dict):
        duplicate = dict(sample_posting_dict, company="另一家")
        write_issue(1234, [sample_posting_dict])
        write_issue(1300, [duplicate])

        postings = load_all_postings(parsed_dir)

        assert len(postings) == 1
        assert postings[0].company == "字节跳动"

    def test_null_fields_tolerated(self, parsed_dir, write_issue):
        write_issue(1234, [{
            "id": "1234-1",
            "issueNumber": 1234,
            "commentId": 1,
            "yearMonth": None,
            "company": None,
            "location": None,
            "techStack": None,
            "positions": None,
            "isRemote": None,
        }])

        posting = load_all_postings(parsed_dir)[0]

        assert posting.year_month == "unknown"
        assert posting.location == []
        assert posting.tech_stack == []
        assert posting.positions == []
        assert posting.is_remote is False

    def test_non_json_files_ignored(self, parsed_dir, write_issue, sample_posting_dict):
        write_issue(1234, [sample_posting_dict])
        (parsed_dir / "notes.txt").write_text("hello", encoding="utf-8")
        assert len(load_all_postings(parsed_dir)) == 1


class TestParsedIssueFiles:
    """单个解析结果文件读写"""

    def test_read_source_file_rejects_non_object(self, parsed_dir):
        path = parsed_dir / "1.json"
        path.write_text("[]", encoding="utf-8")
        with pytest.raises(SourceFileError) as exc_info:
            read_source_file(path)
        assert exc_info.value.path == str(path)

    def test_load_parsed_issue_missing_returns_none(self, parsed_dir):
        assert load_parsed_issue(parsed_dir / "404.json") is None

    def test_load_parsed_issue_invalid_structure(self, parsed_dir):
        path = parsed_dir / "1.json"
        path.write_text(json.dumps({"postings": []}), encoding="utf-8")
        with pytest.raises(SourceFileError):
            load_parsed_issue(path)

    def test_save_then_load(self, tmp_path, make_posting):
        issue = ParsedIssue(
            issue_number=1000,
            year_month="2024-01",
            postings=[make_posting(company="声网", location=["上海"])],
        )
        path = save_parsed_issue(issue, tmp_path / "out")

        assert path.name == "1000.json"
        raw = json.loads(path.read_text(encoding="utf-8"))
        assert raw["issueNumber"] == 1000
        assert raw["postings"][0]["company"] == "声网"
        assert load_parsed_issue(path) == issue


class TestWriteViews:
    """write_views 测试"""

    def test_writes_six_files(self, tmp_path, make_posting):
        result = aggregate([make_posting(location=["北京"], company="美团")])
        out_dir = tmp_path / "nested" / "data"

        written = write_views(result, out_dir)

        assert set(written) == set(AggregationConfig.OUTPUT_FILES)
        for key, filename in AggregationConfig.OUTPUT_FILES.items():
            assert (out_dir / filename).exists()
            assert written[key] == out_dir / filename

        overview = json.loads((out_dir / "overview.json").read_text(encoding="utf-8"))
        assert overview["totalPostings"] == 1
        assert overview["topCities"] == [{"name": "北京", "count": 1}]

    def test_utf8_not_escaped_and_indented(self, tmp_path, make_posting):
        result = aggregate([make_posting(location=["北京"])])
        write_views(result, tmp_path)

        text = (tmp_path / "city-stats.json").read_text(encoding="utf-8")
        assert "北京" in text
        assert "\\u" not in text
        assert '\n  "rankings"' in text

    def test_empty_result_written(self, tmp_path):
        write_views(empty_result(), tmp_path)
        monthly = json.loads((tmp_path / "monthly-stats.json").read_text(encoding="utf-8"))
        assert monthly == []

    def test_unwritable_directory_raises(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("x", encoding="utf-8")
        with pytest.raises(OutputWriteError):
            write_views(empty_result(), blocker / "sub")

    def test_write_failure_raises(self, tmp_path, mocker):
        mocker.patch("hiring_insight.storage.writer.open", create=True, side_effect=PermissionError("read-only"))
        with pytest.raises(OutputWriteError, match="read-only"):
            write_views(empty_result(), tmp_path)
