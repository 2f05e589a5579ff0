"""Mod discovery, settings and file redirection for the mods folder."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .ini import IniParser

MOD_INI = "mod.ini"
MOD_CONFIG = "modconfig.ini"
CONFIG_SECTION = "mods"

_REPLACEMENT_FOLDERS = ("Data", "Scripts", "Videos")


@dataclass
class ModInfo:
    """Metadata and replacement files of one mod folder."""

    name: str = ""
    desc: str = ""
    author: str = ""
    version: str = ""
    file_map: dict[str, str] = field(default_factory=dict)
    folder: str = ""
    use_scripts: bool = False
    disable_focus_pause: bool = False
    redirect_save: bool = False
    save_path: str = ""
    active: bool = False


def resolve_path(given) -> Path:
    """Return the entry in ``given``'s directory whose name matches it case-insensitively.

    Relative paths are taken from the current directory. When nothing matches,
    the (absolute) path is returned unchanged.
    """
    path = Path(given)
    if not path.is_absolute():
        path = Path.cwd() / path
    target = path.name.lower()
    try:
        for entry in path.parent.iterdir():
            if entry.name.lower() == target:
                return entry
    except OSError:
        pass
    return path


def _ini_string(settings: IniParser, key: str) -> str:
    try:
        return settings.get_string("", key)
    except KeyError:
        return ""


def _ini_bool(settings: IniParser, section: str, key: str) -> bool:
    try:
        return settings.get_bool(section, key)
    except KeyError:
        return False


def scan_mod_folder(info: ModInfo, mods_path) -> ModInfo:
    """Add the mod's Data, Scripts and Videos files to ``info.file_map``.

    Keys are the lower-cased paths from the replacement folder onwards, with
    forward slashes; values are the full paths on disk. Existing keys are kept.
    """
    mod_dir = resolve_path(mods_path) / info.folder
    search_start = len(str(mod_dir))
    for folder in _REPLACEMENT_FOLDERS:
        root = resolve_path(mod_dir / folder)
        if not root.is_dir():
            continue
        tokens = (f"{folder}/", f"{folder}\\", f"{folder.lower()}/", f"{folder.lower()}\\")
        try:
            files = sorted(p for p in root.rglob("*") if p.is_file())
        except OSError:
            continue
        for file in files:
            text = str(file)
            position = next(
                (pos for pos in (text.find(token, search_start) for token in tokens) if pos >= 0),
                -1,
            )
            if position < 0:
                continue
            key = text[position:].replace("\\", "/").lower()
            info.file_map.setdefault(key, text)
    return info


def load_mod(mods_path, folder: str, active: bool) -> ModInfo | None:
    """Read ``<mods_path>/<folder>/mod.ini``; return None if the folder holds no mod."""
    mod_ini = Path(mods_path) / folder / MOD_INI
    if not mod_ini.is_file():
        return None
    settings = IniParser.from_file(mod_ini)

    info = ModInfo(
        name=_ini_string(settings, "Name") or "Unnamed Mod",
        desc=_ini_string(settings, "Description"),
        author=_ini_string(settings, "Author") or "Unknown Author",
        version=_ini_string(settings, "Version") or "1.0.0",
        folder=folder,
        active=active,
    )
    scan_mod_folder(info, mods_path)

    info.use_scripts = _ini_bool(settings, "", "TxtScripts")
    info.disable_focus_pause = _ini_bool(settings, "", "DisableFocusPause")
    info.redirect_save = _ini_bool(settings, "", "RedirectSaveRAM")
    if info.redirect_save and info.active:
        info.save_path = f"mods/{folder}/"
    return info


def get_scene_id(stage_names, scene_name: str) -> int:
    """Index of the first stage whose name equals ``scene_name`` ignoring spaces, or -1."""
    wanted = scene_name.replace(" ", "")
    return next(
        (index for index, name in enumerate(stage_names) if name.replace(" ", "") == wanted),
        -1,
    )


@dataclass
class ModManager:
    """The list of installed mods and the engine flags they control."""

    base_path: str = ""
    force_use_scripts_config: bool = False
    disable_focus_pause_config: bool = False
    mods: list[ModInfo] = field(default_factory=list)
    active_mod: int = -1
    force_use_scripts: bool = False
    disable_focus_pause: bool = False
    redirect_save: bool = False
    save_path: str = ""

    @property
    def mods_dir(self) -> Path:
        """The mods directory, matched case-insensitively."""
        return resolve_path(Path(self.base_path) / "mods")

    def init_mods(self) -> list[ModInfo]:
        """Rebuild the mod list: configured mods in order, then any other mod folders."""
        self.mods.clear()
        mods_dir = self.mods_dir
        if mods_dir.is_dir():
            config_path = mods_dir / MOD_CONFIG
            if config_path.is_file():
                config = IniParser.from_file(config_path)
                for item in config.items:
                    active = _ini_bool(config, CONFIG_SECTION, item.key)
                    info = load_mod(mods_dir, item.key, active)
                    if info is not None:
                        self.mods.append(info)

            known = {info.folder for info in self.mods}
            for entry in sorted(mods_dir.iterdir()):
                if not entry.is_dir() or entry.name in known:
                    continue
                info = load_mod(mods_dir, entry.name, False)
                if info is not None:
                    self.mods.append(info)
                    known.add(entry.name)

        self.refresh_flags()
        return self.mods

    def refresh_flags(self) -> None:
        """Recompute the script, focus-pause and save-redirect flags from active mods."""
        self.disable_focus_pause = self.disable_focus_pause_config
        self.force_use_scripts = self.force_use_scripts_config
        self.save_path = ""
        self.redirect_save = False
        for info in self.mods:
            if not info.active:
                continue
            if info.use_scripts:
                self.force_use_scripts = True
            if info.disable_focus_pause:
                self.disable_focus_pause = True
            if info.redirect_save:
                self.save_path = info.save_path
                self.redirect_save = True

    def save_mods(self) -> None:
        """Write each mod's active state to the mods folder's config file."""
        mods_dir = self.mods_dir
        if not mods_dir.is_dir():
            return
        config = IniParser()
        for info in self.mods:
            config.set_bool(CONFIG_SECTION, info.folder, info.active)
        config.write(mods_dir / MOD_CONFIG)

    def resolve_file(self, path: str) -> str | None:
        """Return the path a mod supplies in place of ``path``, or None if none does."""
        if self.active_mod != -1:
            folder = self.mods[self.active_mod].folder
            return f"{self.base_path}mods/{folder}/{path}"

        lowered = path.lower()
        for info in self.mods:
            if info.active and lowered in info.file_map:
                return info.file_map[lowered]

        if self.force_use_scripts and path.startswith("Data/Scripts/") and path.endswith("txt"):
            return path[len("Data/"):]
        return None