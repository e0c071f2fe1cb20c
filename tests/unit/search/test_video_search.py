"""Tests for substring search over forest videos."""

from __future__ import annotations

import unittest

from mediatree.search import search_videos
from mediatree.snapshot import restore_forest, serialize_forest
from mediatree.tree_model import DetachedVideoEntry, FileDescriptor, build_folder_tree


def _file(path: str) -> FileDescriptor:
    name = path.rsplit("/", 1)[-1]
    return FileDescriptor(name=name, path=path, size=1, is_video=name.endswith(".mp4"))


class SearchVideosTests(unittest.TestCase):
    def setUp(self) -> None:
        self.forest = build_folder_tree(
            [
                _file("Course/Lesson 2.mp4"),
                _file("Course/notes.txt"),
                _file("Course/Lesson 1.mp4"),
                _file("Course/lesson plan.txt"),
                _file("Other/Deep/Bonus LESSON 10.mp4"),
                _file("Other/intro.mp4"),
            ]
        )

    def test_scenario_matches_videos_case_insensitively_and_sorts(self) -> None:
        forest = build_folder_tree([_file("Lesson 1.mp4"), _file("Lesson 2.mp4"), _file("notes.txt")])

        results = search_videos(forest, "lesson")

        self.assertEqual([video.name for video in results], ["Lesson 1.mp4", "Lesson 2.mp4"])

    def test_blank_terms_return_nothing(self) -> None:
        self.assertEqual(search_videos(self.forest, ""), [])
        self.assertEqual(search_videos(self.forest, "   \t"), [])

    def test_collects_across_folders_in_natural_order(self) -> None:
        results = search_videos(self.forest, "LeSsOn")

        self.assertEqual(
            [video.path for video in results],
            ["Course/Lesson 1.mp4", "Course/Lesson 2.mp4", "Other/Deep/Bonus LESSON 10.mp4"],
        )

    def test_matches_substrings_not_whole_words(self) -> None:
        results = search_videos(self.forest, "ntr")
        self.assertEqual([video.name for video in results], ["intro.mp4"])

    def test_never_returns_non_video_files(self) -> None:
        self.assertEqual(search_videos(self.forest, "notes"), [])
        self.assertEqual(search_videos(self.forest, "plan"), [])

    def test_searches_restored_forest(self) -> None:
        restored = restore_forest(serialize_forest(self.forest))

        results = search_videos(restored, "intro")

        self.assertEqual(len(results), 1)
        self.assertIsInstance(results[0], DetachedVideoEntry)


if __name__ == "__main__":
    unittest.main()
