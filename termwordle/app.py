"""Terminal front end: key handling, the update loop and the entry point."""

from __future__ import annotations

import argparse
import curses
import enum
import sys
from collections.abc import Collection
from pathlib import Path
from typing import Any

import requests

from termwordle.game import load_word_list
from termwordle.manager import GameManager
from termwordle.save import SaveData
from termwordle.stats import Stats
from termwordle.widget import render_game, render_stats


class Message(enum.Enum):
    LETTER = enum.auto()
    BACKSPACE = enum.auto()
    SUBMIT = enum.auto()
    NEXT = enum.auto()
    PREVIOUS = enum.auto()
    FIRST = enum.auto()
    LAST = enum.auto()
    STATS = enum.auto()
    ESCAPE = enum.auto()
    QUIT = enum.auto()


_STRING_KEYS = {
    "\x7f": Message.BACKSPACE,
    "\b": Message.BACKSPACE,
    "\n": Message.SUBMIT,
    "\r": Message.SUBMIT,
    "\x03": Message.QUIT,
    "?": Message.STATS,
    "\x1b": Message.ESCAPE,
}

_CODE_KEYS = {
    curses.KEY_BACKSPACE: Message.BACKSPACE,
    curses.KEY_ENTER: Message.SUBMIT,
    curses.KEY_LEFT: Message.PREVIOUS,
    curses.KEY_RIGHT: Message.NEXT,
    curses.KEY_HOME: Message.FIRST,
    curses.KEY_END: Message.LAST,
    curses.KEY_SLEFT: Message.FIRST,
    curses.KEY_SRIGHT: Message.LAST,
}


def key_to_message(key: str | int) -> tuple[Message, str | None] | None:
    """Translate a key from ``get_wch`` into a message and its letter, if any."""
    if isinstance(key, int):
        message = _CODE_KEYS.get(key)
        if message is None:
            try:
                name = curses.keyname(key)
            except (curses.error, ValueError, OverflowError):
                name = b""
            # Ctrl+arrow keys arrive as extended codes named kLFT5 / kRIT5.
            if name.startswith(b"kLFT"):
                message = Message.FIRST
            elif name.startswith(b"kRIT"):
                message = Message.LAST
        return None if message is None else (message, None)
    if key in _STRING_KEYS:
        return (_STRING_KEYS[key], None)
    if len(key) == 1 and key.isalpha():
        return (Message.LETTER, key.upper() if key.isascii() else key)
    return None


class Model:
    """The application state driven by messages."""

    def __init__(self, manager: GameManager, words: Collection[str]) -> None:
        self.manager = manager
        self.words = words
        self.stats: Stats | None = None
        self.running = True

    def update(self, message: Message, letter: str | None = None) -> None:
        game = self.manager.game
        if message is Message.LETTER:
            if letter is None:
                raise ValueError("a letter message needs a letter")
            game.add_char(letter)
        elif message is Message.BACKSPACE:
            game.backspace()
        elif message is Message.SUBMIT:
            game.submit(self.words)
        elif message is Message.NEXT:
            self.manager.next()
        elif message is Message.PREVIOUS:
            self.manager.previous()
        elif message is Message.FIRST:
            self.manager.first()
        elif message is Message.LAST:
            self.manager.last()
        elif message is Message.STATS:
            self.stats = None if self.stats is not None else self.manager.stats()
        elif message is Message.ESCAPE:
            self.stats = None
        elif message is Message.QUIT:
            self.running = False
        self.manager.save()

    def view(self, window: Any) -> None:
        render_game(window, self.manager.game)
        if self.stats is not None:
            render_stats(window, self.stats)


def _run(screen: Any, model: Model) -> None:
    curses.raw()
    screen.keypad(True)
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    while model.running:
        screen.erase()
        model.view(screen)
        screen.refresh()
        try:
            key = screen.get_wch()
        except curses.error:
            continue
        translated = key_to_message(key)
        if translated is not None:
            model.update(*translated)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="termwordle", description="Play the daily word puzzle.")
    parser.add_argument("wordlist", type=Path, help="file of accepted guesses, one per line")
    parser.add_argument("--save-file", type=Path, default=None, help="where games are saved")
    args = parser.parse_args(argv)

    try:
        words = load_word_list(args.wordlist)
    except OSError as exc:
        print(f"termwordle: cannot read word list: {exc}", file=sys.stderr)
        return 1

    try:
        save_data = SaveData.from_file(args.save_file)
    except (OSError, ValueError):
        save_data = SaveData()
        save_data.path = args.save_file

    try:
        manager = GameManager.create(save_data)
    except (requests.RequestException, ValueError) as exc:
        print(f"termwordle: cannot fetch today's puzzle: {exc}", file=sys.stderr)
        return 1

    with save_data:
        curses.wrapper(_run, Model(manager, words))
    return 0