"""
locale.py: All UI strings for English, Russian, and Romanian.

Usage:
    from .locale import t, set_lang, get_lang

    t("menu.human_vs_computer") -> "HUMAN VS COMPUTER" / "ЧЕЛОВЕК ПРОТИВ КОМПЬЮТЕРА" / ...
    t("game.peek")              -> "PEEK" / "ПОДСМОТРЕТЬ" / "PRIVEȘTE"
"""
from __future__ import annotations

_lang: str = "en"   # "en" | "ru" | "ro"

def get_lang() -> str:
    return _lang

def set_lang(code: str) -> None:
    global _lang
    if code in ("en", "ru", "ro"):
        _lang = code

def t(key: str) -> str:
    """Translate a dot-notation key for the current language."""
    node = _STRINGS
    for part in key.split("."):
        if isinstance(node, dict) and part in node:
            node = node[part]
        else:
            return key   # fallback: return the key itself
    if isinstance(node, dict):
        return node.get(_lang, node.get("en", key))
    return str(node)


# ── String table ──────────────────────────────────────────────────────────────
# Each leaf is either a plain string (English only) or {"en":..., "ru":..., "ro":...}

_STRINGS: dict = {

    # ── Mode select ───────────────────────────────────────────────────────────
    "menu": {
        "title":             {"en": "SELECT GAME MODE",    "ru": "ВЫБОР РЕЖИМА",      "ro": "SELECTEAZĂ MODUL"},
        "subtitle":          "A  POKEMON  CARD  DUEL",
        "human_vs_computer": {"en": "HUMAN VS COMPUTER",   "ru": "ЧЕЛОВЕК VS КОМПЬЮТЕР", "ro": "OM VS CALCULATOR"},
        "computer_vs_computer": {"en": "COMPUTER VS COMPUTER", "ru": "КОМПЬЮТЕР VS КОМПЬЮТЕР", "ro": "CALCULATOR VS CALCULATOR"},
        "quit":              {"en": "QUIT",                "ru": "ВЫХОД",             "ro": "IEȘIRE"},
    },

    # ── Duel screen ───────────────────────────────────────────────────────────
    "game": {
        "choose":        {"en": "CHOOSE A CARD",        "ru": "ВЫБЕРИТЕ КАРТУ",    "ro": "ALEGE O CARTE"},
        "thinking":      {"en": "THINKING",             "ru": "ДУМАЕТ",            "ro": "SE GÂNDEȘTE"},
        "reveal":        {"en": "PRESS ENTER TO REVEAL THE CARDS",
                          "ru": "НАЖМИТЕ ENTER, ЧТОБЫ ОТКРЫТЬ КАРТЫ",
                          "ro": "APASĂ ENTER PENTRU A DEZVĂLUI CĂRȚILE"},
        "peek":          {"en": "PEEK",                 "ru": "ПОДСМОТРЕТЬ",       "ro": "PRIVEȘTE"},
        "played":        {"en": "PLAYED",               "ru": "СЫГРАНО",           "ro": "JUCATE"},
        "deck":          {"en": "DECK",                 "ru": "КОЛОДА",            "ro": "PACHET"},
        "vs":            "VS.",
        "damage":        {"en": "DMG",                  "ru": "УРОН",              "ro": "DMG"},
        "hidden_label":  "POKEMON",
        "round_win":     {"en": "WINS THE ROUND  +5",   "ru": "ВЫИГРЫВАЕТ РАУНД  +5", "ro": "CÂȘTIGĂ RUNDA  +5"},
        "round_tie":     {"en": "ROUND TIED, NO POINTS", "ru": "НИЧЬЯ, БЕЗ ОЧКОВ", "ro": "EGALITATE, FĂRĂ PUNCTE"},
    },

    # ── Result screen ─────────────────────────────────────────────────────────
    "result": {
        "victory":      {"en": "VICTORY",        "ru": "ПОБЕДА",     "ro": "VICTORIE"},
        "defeat":       {"en": "DEFEAT",         "ru": "ПОРАЖЕНИЕ",  "ro": "ÎNFRÂNGERE"},
        "draw":         {"en": "DRAW",           "ru": "НИЧЬЯ",      "ro": "EGAL"},
        "wins":         {"en": "WINS THE GAME!", "ru": "ПОБЕЖДАЕТ!", "ro": "CÂȘTIGĂ JOCUL!"},
        "tie":          {"en": "THE GAME IS A TIE!", "ru": "ИГРА ВНИЧЬЮ!", "ro": "JOCUL E EGAL!"},
        "final_scores": {"en": "FINAL SCORES",   "ru": "ИТОГОВЫЙ СЧЁТ", "ro": "SCOR FINAL"},
        "rounds":       {"en": "ROUNDS PLAYED",  "ru": "РАУНДОВ",    "ro": "RUNDE JUCATE"},
        "press_any_key":{"en": "PRESS ANY KEY TO CONTINUE",
                         "ru": "НАЖМИТЕ ЛЮБУЮ КЛАВИШУ",
                         "ro": "APASĂ ORICE TASTĂ"},
    },
}
