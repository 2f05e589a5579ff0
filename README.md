# retrokit

Pure-Python building blocks for a classic 2D sprite game engine. Each module
works on its own and needs nothing beyond the standard library.

## Modules

| Module               | What it provides                                                              |
|----------------------|-------------------------------------------------------------------------------|
| `retrokit.ini`       | `IniParser`, `ConfigItem`, `ItemType`: a forgiving INI reader/writer with typed getters and setters |
| `retrokit.trig`      | Fixed-point tables `sin_m`, `cos_m`, `sin512`, `cos512`, `sin256`, `cos256` and `arc_tan_lookup` |
| `retrokit.palette`   | `PaletteBank` (eight 256-colour palettes, per-line selection, fades, rotation, `.act` loading), `PaletteEntry`, `RenderType`, `rgb888_to_rgb565`, `rgb888_to_rgb5551` |
| `retrokit.cipher`    | `Cipher`: the rolling byte cipher applied to files inside a data pack        |
| `retrokit.datapack`  | `DataPack` and `VirtualFile` for reading files from a data pack, `build_data_pack` to make one, `FileNotInPackError`, `windows_path` |
| `retrokit.controls`  | `InputState`, `InputButton`, `InputData`, `Button`, plus `axis_delta` and `trigger_delta` for stick and trigger readings |
| `retrokit.mods`      | `ModManager`, `ModInfo`, `load_mod`, `scan_mod_folder`, `resolve_path`, `get_scene_id` |

## Examples

Configuration files:

```python
from retrokit.ini import IniParser

config = IniParser.parse("[Game]\nLanguage=0\nDevMenu=true\n")
config.get_int("Game", "Language")     # 0
config.get_bool("Game", "DevMenu")     # True
config.get_string("Game", "Missing")   # raises KeyError

config.set_float("Audio", "BGMVolume", 1.0)
config.set_comment("Audio", "note", "volumes run from 0 to 1")
print(config.dumps())
config.write("settings.ini")
```

Fixed-point trigonometry, where a full turn is 512 (or 256) steps:

```python
from retrokit.trig import sin512, cos256, arc_tan_lookup

sin512(128)            # 512, a quarter turn
cos256(128)            # -256, a half turn
arc_tan_lookup(1, 1)   # angle as a byte, 0..255
```

Data packs:

```python
from retrokit.datapack import DataPack, build_data_pack

blob = build_data_pack({"Data/Game/GameConfig.bin": b"\x01\x02\x03"})
pack = DataPack(blob)
pack.read_bytes("Data/Game/GameConfig.bin")   # b"\x01\x02\x03"

with_file = DataPack.from_file("Data.rsdk")
if "Data/Palettes/MasterPalette.act" in with_file:
    stream = with_file.open("Data/Palettes/MasterPalette.act")
    header = stream.read(3)
    stream.seek(0)
```

`DataPack.open` raises `FileNotInPackError` (a `FileNotFoundError`) when the
path is not stored in the pack.

Palettes:

```python
from retrokit.palette import PaletteBank, rgb888_to_rgb565

bank = PaletteBank()
bank.load_act(raw_act_bytes, 0, 0, 0, 256)   # needs 768 bytes of RGB data
bank.set_fade(0, 0, 0, 128)
rgb888_to_rgb565(0xFF, 0xFF, 0xFF)           # 0xFFFF
```

Input state, advanced once per frame:

```python
from retrokit.controls import Button, InputData, InputState

state = InputState()
state.update({Button.A})
pressed = state.check_key_press(InputData(), 0xFF)
pressed.a   # True on the first frame the button is held
```

Mods, read from `<base_path>mods/`:

```python
from retrokit.mods import ModManager

manager = ModManager(base_path="")
manager.init_mods()
manager.resolve_file("Data/Sprites/Player.gif")   # replacement path or None
manager.save_mods()                                # writes mods/modconfig.ini
```

## What it does not do

retrokit is a set of parts, not a game. It has no command-line program, no
window, renderer or audio output, and no script interpreter. It does not run
a game loop, update or draw game objects, or handle player movement; input is
supplied to `InputState.update` by the caller rather than read from a
keyboard or controller.

## Running the tests

Install the `test` extra and run `pytest` from the project root.