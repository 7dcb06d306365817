# termwordle

A terminal Wordle client built on curses. It downloads the daily puzzle,
lets you guess it on a full-screen board with a coloured on-screen
keyboard, and keeps a record of every game you play so you can come back
to it later and see your statistics.

## Installing

```
pip install termwordle
```

curses must be available to Python, so this runs on Linux, macOS and
other Unix-like systems.

## Playing

termwordle does not ship a list of accepted guesses. Give it a text file
with one lower-case five-letter word per line:

```
termwordle words.txt
```

Options:

- `wordlist` (required): the file of accepted guesses.
- `--save-file PATH`: where games are stored. Defaults to `save.dat` in
  your user data directory for `termwordle`.

On start the puzzle for today's date (UTC) is downloaded; a network
connection is needed for that and for any day you have not played before.
If it cannot be fetched, or the word list cannot be read, the command
prints an error and exits with status 1.

Type a five-letter word and press Enter to submit it. A guess that is not
in the word list is not scored. After each guess the letters are coloured:

- green: the right letter in the right place
- yellow: the letter is in the word, but somewhere else
- gray: the letter is not in the word (or not as many times as guessed)

The keyboard at the bottom of the screen shows the best colour each letter
has earned so far. You have six guesses. When a game ends, a message shows
how well you did (from "Genius" for one guess to "Phew" for six), or
reveals the word if you ran out of guesses.

### Keys

| Key                            | Action                               |
|--------------------------------|--------------------------------------|
| letters                        | type a letter                        |
| Backspace                      | delete the last letter               |
| Enter                          | submit the guess                     |
| Left / Right                   | go to the previous / next day's game |
| Ctrl+Left, Shift+Left, Home    | go to the very first Wordle          |
| Ctrl+Right, Shift+Right, End   | go to today's Wordle                 |
| `?`                            | show or hide the statistics          |
| Esc                            | close the statistics                 |
| Ctrl+C                         | quit                                 |

You can move between any day from the first Wordle (19 June 2021) up to
today. Games you have already played are restored from your save file
instead of being fetched again. If a day cannot be fetched, the current
game stays on screen.

## Saving and statistics

Every game you open is recorded as you play, and all games are written
to the save file (JSON) when you quit. A save file that is missing or
cannot be read is treated as empty.

The statistics window shows how many games you have finished, your win
percentage (shown as `NaN` before any game is finished), and a chart of
how many guesses your wins took.