"""Background music and sound effects, loaded from numbered files."""

from __future__ import annotations

from enum import IntEnum
from os import PathLike
from pathlib import Path
from typing import Callable, Protocol

DEFAULT_SOUND_DIRECTORY = "../external/Resources/sounds/"
DEFAULT_MUSIC_VOLUME = 200
DEFAULT_SFX_VOLUME = 100


class SoundType(IntEnum):
    BUTTON_SFX = 0
    TOKEN_SFX = 1
    BUY_CARD_SFX = 2
    HOLD_CARD_SFX = 3
    WIN_NOBLE_SFX = 4
    OVER_SFX = 5
    CHECK_BOX_SFX = 6
    WRONG_SFX = 7


class MusicType(IntEnum):
    MENU_MUSIC = 0
    GAME_MUSIC = 1


class SoundLoadError(OSError):
    """A music or sound file could not be opened."""


class SoundNotLoadedError(LookupError):
    """A track was used before the sound files were loaded."""


class Music(Protocol):
    def play(self) -> None: ...

    def pause(self) -> None: ...

    def set_volume(self, volume: float) -> None: ...

    def set_loop(self, loop: bool) -> None: ...


class Sound(Protocol):
    def play(self) -> None: ...

    def set_volume(self, volume: float) -> None: ...


def _clamp(volume: float) -> float:
    return max(0, min(volume, 100))


def _open_pygame_sound(path: Path):
    import pygame

    try:
        if not pygame.mixer.get_init():
            pygame.mixer.init()
        return pygame.mixer.Sound(str(path))
    except pygame.error as exc:
        raise OSError(str(exc)) from exc


class _PygameMusic:
    """A looping track played on its own mixer channel."""

    def __init__(self, path: Path) -> None:
        self._sound = _open_pygame_sound(path)
        self._channel = None
        self._paused = False
        self._loop = False

    def set_loop(self, loop: bool) -> None:
        self._loop = loop

    def set_volume(self, volume: float) -> None:
        self._sound.set_volume(_clamp(volume) / 100)

    def play(self) -> None:
        if self._channel is not None and self._paused:
            self._channel.unpause()
            self._paused = False
            return
        if self._channel is not None and self._channel.get_busy():
            return
        self._channel = self._sound.play(loops=-1 if self._loop else 0)
        self._paused = False

    def pause(self) -> None:
        if self._channel is not None:
            self._channel.pause()
            self._paused = True


class _PygameSound:
    """A short effect played once."""

    def __init__(self, path: Path) -> None:
        self._sound = _open_pygame_sound(path)

    def set_volume(self, volume: float) -> None:
        self._sound.set_volume(_clamp(volume) / 100)

    def play(self) -> None:
        self._sound.play()


class SoundSystem:
    """Owns every music track and sound effect and their volumes."""

    def __init__(
        self,
        directory: str | PathLike[str] = DEFAULT_SOUND_DIRECTORY,
        music_factory: Callable[[Path], Music] | None = None,
        sound_factory: Callable[[Path], Sound] | None = None,
    ) -> None:
        self.directory = Path(directory)
        self._music_factory = music_factory or _PygameMusic
        self._sound_factory = sound_factory or _PygameSound
        self._musics: dict[MusicType, Music] = {}
        self._sounds: dict[SoundType, Sound] = {}
        self.loaded = False
        self.current_music = MusicType.MENU_MUSIC
        self.music_volume = DEFAULT_MUSIC_VOLUME
        self.sfx_volume = DEFAULT_SFX_VOLUME
        self.music_enabled = True
        self.sfx_enabled = True

    def music_path(self, music_type: MusicType) -> Path:
        return self.directory / f"m_{int(music_type)}.ogg"

    def sound_path(self, sound_type: SoundType) -> Path:
        return self.directory / f"s_{int(sound_type)}.wav"

    def load(self) -> None:
        """Open every track and effect; does nothing once loaded."""
        if self.loaded:
            return
        for music_type in MusicType:
            try:
                self._musics[music_type] = self._music_factory(self.music_path(music_type))
            except OSError as exc:
                raise SoundLoadError("Music file could not be opened") from exc
        for sound_type in SoundType:
            try:
                self._sounds[sound_type] = self._sound_factory(self.sound_path(sound_type))
            except OSError as exc:
                raise SoundLoadError("Sound effect file could not be opened") from exc
        self.loaded = True

    def _music(self, music_type: MusicType) -> Music:
        try:
            return self._musics[music_type]
        except KeyError:
            raise SoundNotLoadedError(f"music {music_type.name} is not loaded") from None

    def _sound(self, sound_type: SoundType) -> Sound:
        try:
            return self._sounds[sound_type]
        except KeyError:
            raise SoundNotLoadedError(f"sound {sound_type.name} is not loaded") from None

    def play_music(self, music_type: MusicType | None = None) -> None:
        """Loop a track if music is enabled; with no track, resume the menu music."""
        if music_type is None:
            self._music(MusicType.MENU_MUSIC).play()
            return
        if not self.music_enabled:
            return
        self.current_music = music_type
        music = self._music(music_type)
        music.set_volume(_clamp(self.music_volume))
        music.set_loop(True)
        music.play()

    def stop_music(self, music_type: MusicType) -> None:
        self._music(music_type).pause()

    def pause_music(self) -> None:
        """Pause every track."""
        for music_type in MusicType:
            self._music(music_type).pause()

    def play_sfx(self, sound_type: SoundType) -> None:
        """Play an effect if effects are enabled."""
        if not self.sfx_enabled:
            return
        sound = self._sound(sound_type)
        sound.set_volume(_clamp(self.sfx_volume))
        sound.play()

    def set_music_volume(self, volume: int) -> None:
        """Store the volume and apply it to the current track."""
        self.music_volume = volume
        self._music(self.current_music).set_volume(volume)

    def set_sfx_volume(self, volume: int) -> None:
        self.sfx_volume = volume