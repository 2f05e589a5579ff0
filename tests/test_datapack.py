import pytest

from retrokit.datapack import (
    DataPack,
    FileNotInPackError,
    VirtualFile,
    build_data_pack,
    windows_path,
)

FILES = {
    "Data/Palettes/MasterPalette.act": bytes(range(256)) * 3,
    "Data/Palettes/Other.act": b"hello palette",
    "Data/Game/GameConfig.bin": b"config data here",
    "Data/Game/SystemText.gif": b"GIF89a" + bytes(50),
}


@pytest.fixture
def pack():
    return DataPack(build_data_pack(FILES))


@pytest.mark.parametrize("path", list(FILES))
def test_round_trip(pack, path):
    assert pack.read_bytes(path) == FILES[path]


def test_contains(pack):
    assert "Data/Game/GameConfig.bin" in pack
    assert "Data/Game/Missing.bin" not in pack
    assert "Data/Nowhere/GameConfig.bin" not in pack
    assert 42 not in pack


def test_missing_file_raises(pack):
    with pytest.raises(FileNotInPackError):
        pack.open("Data/Game/Missing.bin")


def test_missing_directory_raises(pack):
    with pytest.raises(FileNotInPackError):
        pack.read_bytes("Data/Music/Track.ogg")


def test_error_is_file_not_found(pack):
    with pytest.raises(FileNotFoundError):
        pack.open("Data/Game/none")


def test_stored_bytes_are_not_plain():
    content = b"a fairly recognisable plaintext string"
    packed = build_data_pack({"Data/x.txt": content})
    assert content not in packed


def test_header_fields():
    packed = build_data_pack({"Data/a.bin": b"xyz"})
    assert packed[4:6] == (1).to_bytes(2, "little")
    assert packed[6] == len("Data/")
    header_size = int.from_bytes(packed[0:4], "little")
    assert packed[header_size] == len("a.bin")


def test_read_in_chunks(pack):
    path = "Data/Palettes/MasterPalette.act"
    handle = pack.open(path)
    chunks = []
    while not handle.at_end():
        chunks.append(handle.read(100))
    assert b"".join(chunks) == FILES[path]
    assert handle.tell() == len(FILES[path])


def test_seek_resyncs_keystream(pack):
    path = "Data/Palettes/MasterPalette.act"
    handle = pack.open(path)
    handle.read(10)
    handle.seek(300)
    assert handle.tell() == 300
    assert handle.read(20) == FILES[path][300:320]
    handle.seek(0)
    assert handle.read() == FILES[path]


def test_read_past_end_is_clamped(pack):
    path = "Data/Palettes/Other.act"
    handle = pack.open(path)
    assert handle.read(1000) == FILES[path]
    assert handle.read(5) == b""
    assert handle.at_end()


def test_negative_seek_rejected(pack):
    handle = pack.open("Data/Palettes/Other.act")
    with pytest.raises(ValueError):
        handle.seek(-1)


def test_virtual_file_size(pack):
    handle = pack.open("Data/Game/GameConfig.bin")
    assert isinstance(handle, VirtualFile)
    assert handle.size == len(FILES["Data/Game/GameConfig.bin"])
    assert handle.name == "Data/Game/GameConfig.bin"


def test_empty_last_file_is_not_found():
    pack = DataPack(build_data_pack({"Data/empty.bin": b""}))
    assert "Data/empty.bin" not in pack


def test_file_without_directory():
    pack = DataPack(build_data_pack({"root.bin": b"top level", "Data/a": b"a"}))
    assert pack.read_bytes("root.bin") == b"top level"
    assert pack.read_bytes("Data/a") == b"a"


def test_from_file(tmp_path):
    target = tmp_path / "Data.rsdk"
    target.write_bytes(build_data_pack(FILES))
    pack = DataPack.from_file(target)
    assert pack.read_bytes("Data/Game/SystemText.gif") == FILES["Data/Game/SystemText.gif"]


def test_truncated_pack_raises():
    packed = build_data_pack(FILES)
    with pytest.raises(ValueError):
        DataPack(packed[:5]).open("Data/Game/GameConfig.bin")


def test_name_too_long():
    with pytest.raises(ValueError):
        build_data_pack({"Data/" + "x" * 300: b"1"})


def test_windows_path():
    assert windows_path("Data/Game/GameConfig.bin") == "Data\\Game\\GameConfig.bin"
    assert windows_path("plain") == "plain"