"""Tests for synthetic tree generation."""

from pathlib import Path

from treewalk.bench.trees import count_tree, create_random_tree, create_tree_to_target_dirs


def _listing(base: Path) -> list[str]:
    return sorted(p.relative_to(base).as_posix() for p in base.rglob("*"))


class TestCreateRandomTree:
    """Tests for create_random_tree."""

    def test_same_seed_gives_same_tree(self, tmp_path: Path):
        first = tmp_path / "first"
        second = tmp_path / "second"
        first.mkdir()
        second.mkdir()

        create_random_tree(first, max_layers=4, max_dirs_per_layer=5, max_files_per_dir=3, seed="abc")
        create_random_tree(second, max_layers=4, max_dirs_per_layer=5, max_files_per_dir=3, seed="abc")

        assert _listing(first) == _listing(second)

    def test_names_encode_layer(self, tmp_path: Path):
        create_random_tree(tmp_path, max_layers=3, max_dirs_per_layer=4, max_files_per_dir=4, seed=1)

        for path in tmp_path.rglob("*"):
            prefix = "dir_" if path.is_dir() else "file_"
            assert path.name.startswith(prefix)


class TestCreateTreeToTargetDirs:
    """Tests for create_tree_to_target_dirs."""

    def test_creates_exact_directory_count(self, tmp_path: Path):
        created = create_tree_to_target_dirs(tmp_path, 1500, max_depth=10, max_files_per_dir=0)

        assert created == 1500
        assert count_tree(tmp_path).dirs == 1500
        assert len(list(tmp_path.iterdir())) == 1000

    def test_small_target_fits_in_first_level(self, tmp_path: Path):
        create_tree_to_target_dirs(tmp_path, 10, max_depth=10, max_files_per_dir=0)

        assert len(list(tmp_path.iterdir())) == 10

    def test_max_depth_caps_levels(self, tmp_path: Path):
        created = create_tree_to_target_dirs(tmp_path, 5000, max_depth=1, max_files_per_dir=0)

        assert created == 1000

    def test_expanded_directories_get_files(self, tmp_path: Path):
        create_tree_to_target_dirs(tmp_path, 3, max_depth=10, max_files_per_dir=2)

        assert sorted(p.name for p in tmp_path.iterdir() if p.is_file()) == ["f_0_0.txt", "f_0_1.txt"]


class TestCountTree:
    """Tests for count_tree."""

    def test_counts_files_and_directories(self, sample_tree: Path):
        count = count_tree(sample_tree)
        assert count.files == 3
        assert count.dirs == 1

    def test_follows_symlinks_and_ignores_broken_ones(self, tmp_path: Path):
        target = tmp_path / "target"
        target.mkdir()
        (target / "inside.txt").write_text("x")
        root = tmp_path / "root"
        root.mkdir()
        (root / "link").symlink_to(target, target_is_directory=True)
        (root / "broken").symlink_to(tmp_path / "nowhere")

        count = count_tree(root)
        assert count.files == 1
        assert count.dirs == 1
