"""
audio.py: duel sound effects and the two looping music tracks.

Everything here is optional: without a mixer, or with files missing from
assets/sounds, calls turn into no-ops and the game runs silent.
"""
from __future__ import annotations

import os
import pygame

_SOUNDS_DIR = os.path.join(os.path.dirname(__file__), "assets", "sounds")

MUSIC_VOL = 0.5
SFX_VOL   = 0.8

# volume units per update() at 60fps, so a full crossfade takes ~0.2s
_FADE_SPEED = 0.04

# cue → file; cues are named after what happened at the table
_SFX_FILES = {
    "card_place" : "card_place.wav",    # a card leaves a hand
    "card_flip"  : "card_flip.wav",     # plays revealed
    "card_reject": "card_reject.wav",   # number key outside the hand
    "peek"       : "peek.wav",
    "round_win"  : "round_win.wav",
    "round_loss" : "round_loss.wav",
    "menu_click" : "menu_click.wav",
    "win"        : "win.wav",
    "loss"       : "loss.wav",
}

# track → (normal, muffled); the muffled copy fades in under the result overlay
_MUSIC_FILES = {
    "menu": ("menu.wav", "menu_muffled.wav"),
    "duel": ("duel.wav", "duel_muffled.wav"),
}

_CH_NORMAL  = 0
_CH_MUFFLED = 1

_ready         = False
_sounds        : dict[str, pygame.mixer.Sound] = {}
_tracks        : dict[str, tuple[pygame.mixer.Sound | None, pygame.mixer.Sound | None]] = {}
_current_key   : str | None = None
_muffled       = False
_volumes       = [MUSIC_VOL, 0.0]   # normal, muffled
_sfx_enabled   = True


def _load(filename: str, label: str) -> pygame.mixer.Sound | None:
    path = os.path.join(_SOUNDS_DIR, filename)
    if not os.path.exists(path):
        print(f"[audio] {label} not found: {path}")
        return None
    try:
        return pygame.mixer.Sound(path)
    except pygame.error as e:
        print(f"[audio] failed to load {label} '{path}': {e}")
        return None


def _channels() -> tuple[pygame.mixer.Channel, pygame.mixer.Channel]:
    return pygame.mixer.Channel(_CH_NORMAL), pygame.mixer.Channel(_CH_MUFFLED)


def _targets() -> list[float]:
    return [0.0, MUSIC_VOL] if _muffled else [MUSIC_VOL, 0.0]


def init() -> bool:
    """Call once after pygame.init(). Returns False when no audio device is available."""
    global _ready
    try:
        pygame.mixer.init(frequency=44100, size=-16, channels=2, buffer=512)
    except pygame.error as e:
        print(f"[audio] mixer unavailable, running silent: {e}")
        return False
    pygame.mixer.set_num_channels(16)
    pygame.mixer.set_reserved(2)   # keep sfx off the music channels

    for key, filename in _SFX_FILES.items():
        snd = _load(filename, "sfx")
        if snd:
            snd.set_volume(SFX_VOL)
            _sounds[key] = snd

    for key, (normal_f, muffled_f) in _MUSIC_FILES.items():
        _tracks[key] = (_load(normal_f, "music"), _load(muffled_f, "music"))

    _ready = True
    return True


def play(key: str) -> None:
    if not _sfx_enabled:
        return
    snd = _sounds.get(key)
    if snd:
        snd.play()


def play_music(key: str) -> None:
    """Start a track on both music channels; the current muffle state picks which one is heard."""
    global _current_key, _volumes
    if not _ready or key == _current_key:
        return

    _current_key = key
    _volumes     = _targets()
    for channel, snd, vol in zip(_channels(), _tracks.get(key, (None, None)), _volumes):
        channel.stop()
        if snd:
            channel.play(snd, loops=-1)
            channel.set_volume(vol)


def set_muffled(state: bool) -> None:
    """Muffle or restore the music. The crossfade runs in update()."""
    global _muffled
    _muffled = state


def update() -> None:
    """Call once per frame."""
    global _volumes
    if not _ready or _current_key is None:
        return
    targets = _targets()
    if _volumes == targets:
        return
    _volumes = [_step_towards(cur, tgt) for cur, tgt in zip(_volumes, targets)]
    for channel, vol in zip(_channels(), _volumes):
        channel.set_volume(vol)


def _step_towards(current: float, target: float) -> float:
    if abs(current - target) <= _FADE_SPEED:
        return target
    return current + _FADE_SPEED * (1 if target > current else -1)


def stop_music() -> None:
    global _current_key
    if _ready:
        for channel in _channels():
            channel.stop()
    _current_key = None


def toggle_sfx() -> bool:
    global _sfx_enabled
    _sfx_enabled = not _sfx_enabled
    return _sfx_enabled
