# enfrendados

Enfrendados is a two-player dice game played in the terminal. It mixes
luck with a little arithmetic. The game's text is in Spanish.

## Installing

    pip install .

## Playing

    enfrendados

To get a repeatable game, for example when trying things out, fix the
random seed:

    enfrendados --seed 42

On a real terminal a flashing cover screen appears first. Press any key to
reach the main menu:

- **1. Jugar** starts a match. Both players type their names. Then each
  rolls one six-sided die to decide who starts, and ties are rolled again.
- **2. Estadistica** shows the scores and remaining dice of the last match
  and the best score of the session.
- **3. Creditos** shows the credits.
- **4. Reglamento** shows the rules.
- **0. Salir** quits after you confirm with S or N.

Pressing Ctrl+C, or reaching the end of input, also ends the program. The
terminal colours and cursor are restored on the way out.

## Rules in short

Each player starts with six six-sided dice. A match lasts at most three
rounds, and in each round both players take one turn.

On a turn the player rolls two twelve-sided dice, and their sum is the
target number. The player then rolls their own six-sided dice and picks
them one at a time by position (1, 2, …), trying to reach the target
exactly. The turn ends as soon as the target is reached or every die has
been used. Entering `0` passes the turn.

- **Hitting the target** scores the sum multiplied by the number of dice
  used, and those dice go to the opponent. A player left with no dice wins
  the match at once and earns a bonus of 10,000 points.
- **Missing or passing** means the player takes one die from the opponent,
  but only if the opponent has more than one.

When the rounds are over, the player with more points wins. Equal points
are a draw.

## Using the pieces

The package can also be used as a library:

- `enfrendados.terminal` provides ANSI terminal helpers. These are colours
  (`Color`, `set_color`, `set_background_color`, `reset_color`), cursor
  control (`locate`, `cls`, `hide_cursor`, `show_cursor`, `CursorHider`),
  terminal size (`trows`, `tcols`) and key input (`getch`, `kbhit`,
  `nb_getch`, `getkey`, `translate_key`, `anykey`).
- `enfrendados.vectores` provides small helpers over lists of integers,
  such as `position_of`, `count_occurrences`, `index_of_max`,
  `index_of_min`, `random_values`, `selection_sorted`, `same_values`,
  `format_values` and `read_values`.
- `enfrendados.game` holds the game rules: `Player`, `roll_dice`,
  `decide_first`, `round_status`, `play_turn` and `play_match`. These
  functions read and write through a `Console`. The plain `Console` works
  over any text streams and never waits or clears the screen, so a game
  can be driven by scripted input. `TerminalConsole` adds screen clearing,
  delays and waiting for a key.
- `enfrendados.screens` holds the screens: `main_menu`, `show_statistics`
  and `statistics_report`, `show_rules` and `rules_text`, `show_credits`
  and `credits_text`, and `show_cover`.
- `enfrendados.cli` holds the main loop. It has `Session`, which keeps the
  last players and the session record, plus `confirm_exit`,
  `play_new_game`, `run` and the `main` entry point.

## What it does not do

Scores and the session record are kept only in memory while the program
runs. Nothing is saved between sessions.

## Running the tests

    pip install .[test]
    pytest