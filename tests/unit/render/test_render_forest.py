"""Tests for forest and search-result rendering."""

from __future__ import annotations

import unittest

from mediatree.render import DETACHED_BADGE, highlight_substring, render_forest, render_search_results
from mediatree.search import search_videos
from mediatree.snapshot import restore_forest, serialize_forest
from mediatree.tree_model import FileDescriptor, build_folder_tree
from mediatree.ui_theme import DEFAULT_THEME, PLAIN_THEME, resolve_theme


def _file(path: str, size: int) -> FileDescriptor:
    name = path.rsplit("/", 1)[-1]
    return FileDescriptor(name=name, path=path, size=size, is_video=name.endswith(".mp4"))


class RenderForestTests(unittest.TestCase):
    def setUp(self) -> None:
        self.forest = build_folder_tree(
            [
                _file("Show/S1/e1.mp4", 2048),
                _file("Show/cover.jpg", 10),
                _file("loose.mp4", 0),
            ]
        )

    def test_plain_rows_list_files_before_subfolders(self) -> None:
        rows = render_forest(self.forest, PLAIN_THEME)

        self.assertEqual(
            rows,
            [
                "▾ (root)/ (1 files, 1 videos)",
                "  loose.mp4 [0 B]",
                "▸ Show/ (1 files, 1 videos)",
                "  cover.jpg [10 B]",
                "  ▸ S1/ (1 files, 1 videos)",
                "    e1.mp4 [2 KB]",
            ],
        )

    def test_detached_entries_are_badged(self) -> None:
        restored = restore_forest(serialize_forest(self.forest))

        rows = render_forest(restored, PLAIN_THEME)

        self.assertIn(f"    e1.mp4 [2 KB] {DETACHED_BADGE}", rows)

    def test_default_theme_emits_ansi(self) -> None:
        rows = render_forest(self.forest, DEFAULT_THEME)
        self.assertTrue(any("\033[" in row for row in rows))


class RenderSearchResultsTests(unittest.TestCase):
    def test_empty_results_message(self) -> None:
        self.assertEqual(render_search_results([], "x", PLAIN_THEME), ["No matching videos."])

    def test_results_show_name_size_and_path(self) -> None:
        forest = build_folder_tree([_file("A/Lesson 2.mp4", 1024), _file("A/Lesson 1.mp4", 1024)])

        rows = render_search_results(search_videos(forest, "lesson"), "lesson", PLAIN_THEME)

        self.assertEqual(
            rows,
            [
                "2 matching videos:",
                "  Lesson 1.mp4 [1 KB]  A/Lesson 1.mp4",
                "  Lesson 2.mp4 [1 KB]  A/Lesson 2.mp4",
            ],
        )

    def test_highlight_wraps_matched_text(self) -> None:
        forest = build_folder_tree([_file("A/Lesson 1.mp4", 1)])

        rows = render_search_results(search_videos(forest, "SSON"), "SSON", DEFAULT_THEME)

        self.assertIn(f"Le{DEFAULT_THEME.search_hit}sson{DEFAULT_THEME.reset} 1.mp4", rows[1])

    def test_highlight_tracks_characters_that_grow_when_folded(self) -> None:
        hit, reset = DEFAULT_THEME.search_hit, DEFAULT_THEME.reset

        self.assertEqual(
            highlight_substring("Straße 2 Intro.mp4", "intro", DEFAULT_THEME),
            f"Straße 2 {hit}Intro{reset}.mp4",
        )
        self.assertEqual(
            highlight_substring("Große Pause.mp4", "SS", DEFAULT_THEME),
            f"Gro{hit}ß{reset}e Pause.mp4",
        )


class ThemeTests(unittest.TestCase):
    def test_resolve_theme(self) -> None:
        self.assertEqual(resolve_theme("ocean").name, "ocean")
        self.assertIs(resolve_theme("nope"), DEFAULT_THEME)
        self.assertIs(resolve_theme(None), DEFAULT_THEME)
        self.assertIs(resolve_theme("ocean", no_color=True), PLAIN_THEME)


if __name__ == "__main__":
    unittest.main()
