"""CLI 测试"""

import json

from hiring_insight.exceptions import OutputWriteError
from hiring_insight.main import main


class TestMain:
    """main 测试"""

    def test_aggregates_parsed_files(self, parsed_dir, write_issue, sample_posting_dict, tmp_path):
        write_issue(1234, [sample_posting_dict])
        out_dir = tmp_path / "out"

        exit_code = main(["--parsed-dir", str(parsed_dir), "--out-dir", str(out_dir)])

        assert exit_code == 0
        overview = json.loads((out_dir / "overview.json").read_text(encoding="utf-8"))
        assert overview["totalPostings"] == 1
        assert overview["topCompanies"] == [{"name": "字节跳动", "count": 1}]

    def test_empty_input_writes_zero_templates(self, parsed_dir, tmp_path):
        out_dir = tmp_path / "out"

        assert main(["--parsed-dir", str(parsed_dir), "--out-dir", str(out_dir)]) == 0

        overview = json.loads((out_dir / "overview.json").read_text(encoding="utf-8"))
        assert overview["totalPostings"] == 0
        assert overview["dateRange"] == {"start": "", "end": ""}

    def test_mock_if_empty(self, parsed_dir, tmp_path):
        out_dir = tmp_path / "out"

        assert main([
            "--parsed-dir", str(parsed_dir),
            "--out-dir", str(out_dir),
            "--mock-if-empty",
        ]) == 0

        overview = json.loads((out_dir / "overview.json").read_text(encoding="utf-8"))
        assert overview["totalPostings"] > 0
        assert overview["dateRange"] == {"start": "2019-08", "end": "2026-02"}

    def test_mock_not_used_when_data_exists(self, parsed_dir, write_issue, sample_posting_dict, tmp_path):
        write_issue(1234, [sample_posting_dict])
        out_dir = tmp_path / "out"

        main(["--parsed-dir", str(parsed_dir), "--out-dir", str(out_dir), "--mock-if-empty"])

        overview = json.loads((out_dir / "overview.json").read_text(encoding="utf-8"))
        assert overview["totalPostings"] == 1

    def test_output_failure_exit_code(self, parsed_dir, tmp_path, mocker):
        mocker.patch("hiring_insight.main.write_views", side_effect=OutputWriteError("disk full"))

        assert main(["--parsed-dir", str(parsed_dir), "--out-dir", str(tmp_path)]) == 1
