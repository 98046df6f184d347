"""Tests for Scaffolder.create_course."""

import os

import pytest


def _dirs_under(path):
    """Return every directory below path, relative to it."""
    found = []
    for dirpath, dirnames, _ in os.walk(path):
        for name in dirnames:
            found.append(os.path.relpath(os.path.join(dirpath, name), path))
    return sorted(found)


@pytest.mark.unit
class TestCreateCourse:

    def test_creates_course_and_padded_chapters(self, scaffolder, tmp_path):
        scaffolder.create_course("GoBasics", 3)

        assert _dirs_under(tmp_path) == ["GoBasics", "GoBasics/01", "GoBasics/02", "GoBasics/03"]

    def test_returns_chapter_paths(self, scaffolder, tmp_path):
        chapter_dirs = scaffolder.create_course("GoBasics", 2)

        assert chapter_dirs == [
            os.path.join(str(tmp_path), "GoBasics", "01"),
            os.path.join(str(tmp_path), "GoBasics", "02"),
        ]

    def test_logs_progress(self, scaffolder, console):
        scaffolder.create_course("GoBasics", 2)

        assert console.infos == [
            "Creating course folder 'GoBasics'",
            "Created course directory GoBasics",
            "Ensured chapter directory: 01",
            "Ensured chapter directory: 02",
            "Chapter setup complete.",
        ]
        assert console.warnings == []

    def test_double_digit_chapters(self, scaffolder, tmp_path):
        scaffolder.create_course("Big", 12)

        assert os.path.isdir(tmp_path / "Big" / "12")
        assert len(os.listdir(tmp_path / "Big")) == 12


@pytest.mark.unit
class TestCreateCourseIsIdempotent:

    def test_second_run_creates_nothing_and_warns(self, scaffolder, console, tmp_path):
        scaffolder.create_course("GoBasics", 3)
        before = _dirs_under(tmp_path)
        console.warnings.clear()

        scaffolder.create_course("GoBasics", 3)

        assert _dirs_under(tmp_path) == before
        assert console.warnings == ["Course directory already exists: GoBasics"]

    def test_existing_content_is_untouched(self, scaffolder, tmp_path):
        scaffolder.create_course("GoBasics", 1)
        notes = tmp_path / "GoBasics" / "01" / "notes.md"
        notes.write_text("my notes\n")

        scaffolder.create_course("GoBasics", 2)

        assert notes.read_text() == "my notes\n"
        assert os.path.isdir(tmp_path / "GoBasics" / "02")

    def test_rerun_with_more_chapters_extends_course(self, scaffolder, tmp_path):
        scaffolder.create_course("GoBasics", 2)
        scaffolder.create_course("GoBasics", 4)

        assert sorted(os.listdir(tmp_path / "GoBasics")) == ["01", "02", "03", "04"]

    def test_nested_course_name_creates_intermediate_directories(self, scaffolder, tmp_path):
        scaffolder.create_course("tracks/web", 1)

        assert os.path.isdir(tmp_path / "tracks" / "web" / "01")
