"""Idempotent creation of course, chapter and lesson directories."""

import os
from typing import Optional

from golessons.errors import PreconditionError
from golessons.lesson.lesson_files import build_lesson_artifacts
from golessons.numbering import pad2


class Scaffolder:
    """Creates courses and lessons under a project root without overwriting anything.

    The root is resolved once by the caller and passed in; the scaffolder
    never queries the Go toolchain itself.
    """

    def __init__(self, root: str, console):
        self._root = root
        self._console = console

    @property
    def root(self) -> str:
        return self._root

    def course_dir(self, course: str) -> str:
        return os.path.join(self._root, course)

    def chapter_dir(self, course: str, chapter: int) -> str:
        return os.path.join(self.course_dir(course), pad2(chapter))

    def lesson_dir(self, course: str, chapter: int, lesson: int) -> str:
        return os.path.join(self.chapter_dir(course, chapter), pad2(lesson))

    def create_course(self, name: str, num_chapters: int) -> list[str]:
        """Ensure a course directory with chapters 01..num_chapters exists.

        Returns:
            Paths of all chapter directories, existing or new
        """
        self._console.info(f"Creating course folder '{name}'")

        course_dir = self.course_dir(name)
        if os.path.isdir(course_dir):
            self._console.warn(f"Course directory already exists: {name}")
        else:
            os.makedirs(course_dir)
            self._console.info(f"Created course directory {name}")

        chapter_dirs = []
        for chapter in range(1, num_chapters + 1):
            chapter_dir = self.chapter_dir(name, chapter)
            os.makedirs(chapter_dir, exist_ok=True)
            self._console.info(f"Ensured chapter directory: {os.path.basename(chapter_dir)}")
            chapter_dirs.append(chapter_dir)

        self._console.info("Chapter setup complete.")
        return chapter_dirs

    def add_lesson(
        self, course: str, chapter: int, lesson: int, chapter_label: Optional[str] = None,
    ) -> list[str]:
        """Ensure a lesson directory and its three files exist.

        Files already present are left untouched, even if edited by hand.
        ``chapter_label`` is the chapter as typed, shown in the Markdown heading.

        Returns:
            Paths of the files created by this call

        Raises:
            PreconditionError: If the course or chapter directory is missing
        """
        if not os.path.isdir(self.course_dir(course)):
            raise PreconditionError("Course not found.")
        if not os.path.isdir(self.chapter_dir(course, chapter)):
            raise PreconditionError("Chapter not found.")

        self._console.info(f"Adding lesson {pad2(lesson)} to {course} chapter {pad2(chapter)}")

        lesson_dir = self.lesson_dir(course, chapter, lesson)
        if os.path.isdir(lesson_dir):
            self._console.warn("Lesson directory already exists, ensuring files (non-destructive)")
        else:
            os.makedirs(lesson_dir)
            self._console.info(f"Made lesson directory {lesson}")

        created = []
        for artifact in build_lesson_artifacts(course, chapter, lesson, chapter_label):
            path = os.path.join(lesson_dir, artifact.filename)
            if self._write_new_file(path, artifact.content):
                self._console.info(f"Created {path}")
                created.append(path)
            else:
                self._console.warn(f"{artifact.label} already exists, skipping")

        self._console.info("Lesson added successfully.")
        return created

    @staticmethod
    def _write_new_file(path: str, content: str) -> bool:
        """Write content to path only if nothing is there yet."""
        if os.path.exists(path):
            return False
        try:
            with open(path, "x", encoding="utf-8") as f:
                f.write(content)
        except FileExistsError:
            return False
        return True
