"""
Breadcrumb path formatting tests.
"""

import pytest

from sitelog.paths import breadcrumb, leaf_name, path_segments


class TestBreadcrumb:
    def test_trims_to_root_marker(self) -> None:
        result = breadcrumb("/Users/dev/SetupProject/App/Views/Home.ext", "SetupProject")
        assert result == "SetupProject > App > Views > Home.ext"

    def test_missing_marker_keeps_every_segment(self) -> None:
        assert breadcrumb("/tmp/Other/File.ext", "SetupProject") == "tmp > Other > File.ext"

    def test_innermost_marker_wins(self) -> None:
        path = "/work/SetupProject/vendor/SetupProject/App/Home.ext"
        assert breadcrumb(path, "SetupProject") == "SetupProject > App > Home.ext"

    def test_marker_must_match_whole_segment(self) -> None:
        path = "/work/SetupProjectOld/App/Home.ext"
        assert breadcrumb(path, "SetupProject") == "work > SetupProjectOld > App > Home.ext"

    def test_marker_as_file_name(self) -> None:
        assert breadcrumb("/a/b/src", "src") == "src"

    def test_relative_path(self) -> None:
        assert breadcrumb("src/sitelog/core.py", "sitelog") == "sitelog > core.py"

    def test_doubled_separators_are_ignored(self) -> None:
        assert breadcrumb("//tmp//Other/File.ext", "Other") == "Other > File.ext"

    def test_empty_path(self) -> None:
        assert breadcrumb("", "src") == ""

    @pytest.mark.parametrize(
        "path",
        [
            "/Users/dev/SetupProject/App/Views/Home.ext",
            "/tmp/Other/File.ext",
            "SetupProject",
        ],
    )
    def test_reapplying_is_stable(self, path: str) -> None:
        once = breadcrumb(path, "SetupProject")
        assert breadcrumb(once, "SetupProject") == once

    def test_is_pure(self) -> None:
        path = "/Users/dev/SetupProject/App/Home.ext"
        assert breadcrumb(path, "SetupProject") == breadcrumb(path, "SetupProject")


class TestSegments:
    def test_path_segments(self) -> None:
        assert path_segments("/a/b/c.py") == ["a", "b", "c.py"]

    def test_leaf_name(self) -> None:
        assert leaf_name("/Users/dev/App/Views/Home.ext") == "Home.ext"

    def test_leaf_name_falls_back_to_input(self) -> None:
        assert leaf_name("/") == "/"
