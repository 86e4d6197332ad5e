"""Tests for entries and directory readers."""

from pathlib import Path

from sidenav.models import CombinedReader, EntryList, FakeEntry, FileEntry, RootType, StaticReader


def read_all(reader, wait_until, timeout: float = 2.0):
    """Drain a reader and return every delivered batch."""
    batches = []
    errors = []
    done = []

    def on_success(entries):
        batches.append(entries)
        if not entries:
            done.append(True)
            return
        reader.read_entries(on_success, errors.append)

    reader.read_entries(on_success, errors.append)
    wait_until(lambda: done or errors, timeout)
    return batches, errors


def local_entry(path: Path, batch_size: int = 100) -> FileEntry:
    return FileEntry("downloads", "/", local_path=path, batch_size=batch_size)


class TestStaticReader:
    """Tests for StaticReader."""

    def test_delivers_once_then_empty(self) -> None:
        """Entries come in one synchronous batch followed by an empty one."""
        entries = [FakeEntry("a", RootType.CROSTINI)]
        reader = StaticReader(entries)
        batches = []

        reader.read_entries(batches.append)
        reader.read_entries(batches.append)

        assert batches == [entries, []]


class TestLocalDirectoryReader:
    """Tests for reading real directories."""

    def test_reads_children_sorted(self, tmp_path: Path, wait_until) -> None:
        """Children are delivered sorted by name with directory flags."""
        (tmp_path / "b.txt").write_text("b")
        (tmp_path / "a").mkdir()

        batches, errors = read_all(local_entry(tmp_path).create_reader(), wait_until)

        assert errors == []
        entries = [entry for batch in batches for entry in batch]
        assert [entry.name for entry in entries] == ["a", "b.txt"]
        assert entries[0].is_directory
        assert not entries[1].is_directory
        assert entries[0].full_path == "/a"
        assert entries[0].to_url() == "filesystem:downloads/a"

    def test_batches(self, tmp_path: Path, wait_until) -> None:
        """Large directories are delivered in several batches."""
        for index in range(5):
            (tmp_path / f"file{index}").write_text("x")

        batches, _ = read_all(local_entry(tmp_path, batch_size=2).create_reader(), wait_until)

        assert [len(batch) for batch in batches] == [2, 2, 1, 0]

    def test_missing_directory_reports_error(self, tmp_path: Path, wait_until) -> None:
        """A failing read goes to the error callback."""
        batches, errors = read_all(local_entry(tmp_path / "missing").create_reader(), wait_until)

        assert batches == []
        assert len(errors) == 1
        assert isinstance(errors[0], OSError)

    def test_missing_directory_without_error_callback_ends(self, tmp_path: Path, wait_until) -> None:
        """Without an error callback a failing read still ends with an empty batch."""
        batches = []

        local_entry(tmp_path / "missing").create_reader().read_entries(batches.append)

        assert wait_until(lambda: batches)
        assert batches == [[]]

    def test_reader_is_asynchronous(self, tmp_path: Path) -> None:
        """Nothing is delivered before the event loop runs."""
        (tmp_path / "a").mkdir()
        batches = []

        local_entry(tmp_path).create_reader().read_entries(batches.append)

        assert batches == []

    def test_file_has_no_children(self, tmp_path: Path) -> None:
        """Files produce an empty reader."""
        entry = FileEntry("downloads", "/a.txt", is_directory=False, local_path=tmp_path / "a.txt")
        batches = []

        entry.create_reader().read_entries(batches.append)

        assert batches == [[]]


class TestCombinedReader:
    """Tests for CombinedReader."""

    def test_drops_repeated_names(self) -> None:
        """Entries named like an earlier one are skipped."""
        first = [FakeEntry("Linux files", RootType.CROSTINI)]
        second = [FileEntry("downloads", "/Linux files"), FileEntry("downloads", "/Downloads")]
        reader = CombinedReader([StaticReader(first), StaticReader(second)])
        batches = []

        for _ in range(3):
            reader.read_entries(batches.append)

        assert [[entry.name for entry in batch] for batch in batches] == [["Linux files"], ["Downloads"], []]


class TestEntryList:
    """Tests for EntryList."""

    def test_children_management(self) -> None:
        """Children can be added and removed by type."""
        entry_list = EntryList("My files", RootType.MY_FILES)
        linux = FakeEntry("Linux files", RootType.CROSTINI)
        play = FakeEntry("Play files", RootType.ANDROID_FILES)
        entry_list.add_entry(linux)
        entry_list.add_entry(play)

        assert entry_list.remove_by_root_type(RootType.CROSTINI)
        assert not entry_list.remove_by_root_type(RootType.CROSTINI)
        assert entry_list.get_ui_children() == [play]

    def test_reads_ui_children_then_real_directory(self, tmp_path: Path, wait_until) -> None:
        """UI children come first and shadow real entries of the same name."""
        (tmp_path / "Downloads").mkdir()
        (tmp_path / "Linux files").mkdir()
        entry_list = EntryList("My files", RootType.MY_FILES, real_directory=local_entry(tmp_path))
        entry_list.add_entry(FakeEntry("Linux files", RootType.CROSTINI))

        batches, errors = read_all(entry_list.create_reader(), wait_until)

        assert errors == []
        names = [entry.name for batch in batches for entry in batch]
        assert names == ["Linux files", "Downloads"]
        assert isinstance(batches[0][0], FakeEntry)
