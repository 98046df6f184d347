"""Generated lesson files: names and contents, without touching the filesystem."""

from dataclasses import dataclass
from typing import Optional

from golessons.numbering import pad2
from golessons.templates.template_renderer import render_template

SOURCE = "source"
TEST = "test"
DOC = "doc"


@dataclass(frozen=True)
class LessonArtifact:
    kind: str
    label: str
    filename: str
    content: str


def go_package_name(chapter: int, lesson: int) -> str:
    return f"ch{pad2(chapter)}ls{pad2(lesson)}"


def go_test_name(chapter: int, lesson: int) -> str:
    return f"TestCh{pad2(chapter)}Ls{pad2(lesson)}"


def build_lesson_artifacts(
    course: str, chapter: int, lesson: int, chapter_label: Optional[str] = None,
) -> list[LessonArtifact]:
    """Return the Go source, Go test and Markdown files for one lesson.

    The Markdown heading shows ``chapter_label`` (the chapter as the user
    typed it) when given, else the unpadded chapter; every other
    identifier uses the padded numbers.
    """
    padded_lesson = pad2(lesson)
    variables = {
        "course": course,
        "chapter": chapter if chapter_label is None else chapter_label,
        "lesson": padded_lesson,
        "package_name": go_package_name(chapter, lesson),
        "test_name": go_test_name(chapter, lesson),
    }
    files = [
        (SOURCE, "Lesson file", f"lesson{padded_lesson}.go", "lesson.go.j2"),
        (TEST, "Test file", f"lesson{padded_lesson}_test.go", "lesson_test.go.j2"),
        (DOC, "Markdown file", f"lesson{padded_lesson}.md", "lesson.md.j2"),
    ]
    return [
        LessonArtifact(
            kind=kind,
            label=label,
            filename=filename,
            content=render_template(template, package=__package__, **variables),
        )
        for kind, label, filename, template in files
    ]
