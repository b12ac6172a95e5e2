"""Rules of the dice duel: rolling, choosing dice, turns and the three-round match."""

from __future__ import annotations

import random
import sys
from dataclasses import dataclass, field
from typing import Protocol, TextIO

from enfrendados import terminal
from enfrendados.vectores import format_values

STARTING_DICE = 6
ROUNDS = 3
WIN_BONUS = 10000
DEFAULT_PAUSE = "Presione cualquier tecla para continuar..."
_RULE = "-" * 64


class _RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


@dataclass
class Player:
    """A player's name, how many dice they hold, their last roll and their score."""

    name: str
    dice_count: int = STARTING_DICE
    score: int = 0
    dice: list[int] = field(default_factory=list)


class Console:
    """Text input and output over plain streams, with no screen control."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None):
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout

    def write(self, text: str) -> None:
        """Write text as is."""
        self._out.write(text)
        self._out.flush()

    def read_line(self, prompt: str = "") -> str:
        """Read one line without its line ending; EOFError at end of input."""
        if prompt:
            self.write(prompt)
        line = self._in.readline()
        if not line:
            raise EOFError("end of input")
        return line.rstrip("\r\n")

    def pause(self, message: str = DEFAULT_PAUSE) -> None:
        """Show the message; plain streams do not wait."""
        if message:
            self.write(message + "\n")

    def clear(self) -> None:
        """Plain streams have no screen to clear."""

    def sleep(self, ms: int) -> None:
        """Plain streams do not pause between messages."""


class TerminalConsole(Console):
    """Console on the real terminal: clears, delays and waits for key presses."""

    def __init__(self) -> None:
        super().__init__(sys.stdin, sys.stdout)

    def write(self, text: str) -> None:
        super().write(text)

    def read_line(self, prompt: str = "") -> str:
        return super().read_line(prompt)

    def pause(self, message: str = DEFAULT_PAUSE) -> None:
        if message:
            self.write(message + "\n")
            terminal.msleep(1000)
        terminal.anykey()

    def clear(self) -> None:
        terminal.cls()

    def sleep(self, ms: int) -> None:
        terminal.msleep(ms)


def _rng(rng: _RandomSource | None) -> _RandomSource:
    return rng if rng is not None else random.Random()


def _console(console: Console | None) -> Console:
    return console if console is not None else TerminalConsole()


def roll_dice(count: int, rng: _RandomSource | None = None) -> list[int]:
    """Roll count six-sided dice."""
    if count < 0:
        raise ValueError("count must be non-negative")
    source = _rng(rng)
    return [source.randint(1, 6) for _ in range(count)]


def decide_first(
    name1: str,
    name2: str,
    rng: _RandomSource | None = None,
    console: Console | None = None,
) -> int:
    """Roll one die each until they differ; 0 if the first player starts, else 1."""
    source = _rng(rng)
    out = _console(console)
    while True:
        out.sleep(2000)
        out.write("Tirando dados para ver quien empieza...\n")
        die1 = source.randint(1, 6)
        die2 = source.randint(1, 6)
        out.write(f"{name1} sacó un {die1}\n")
        out.sleep(2000)
        out.write(f"{name2} sacó un {die2}\n")
        if die1 != die2:
            return 0 if die1 > die2 else 1
        out.write("¡Empate! Se vuelve a tirar.\n\n")
        out.sleep(2000)


def round_status(round_number: int, first: Player, second: Player) -> str:
    """The summary shown at the start of a round."""
    return (
        f"Ronda {round_number}\n"
        f"{_RULE}\n"
        f"Puntajes de {first.name}: {first.score}\n"
        f"Puntajes de {second.name}: {second.score}\n"
        f"{_RULE}\n"
        f"Dados de {first.name}: {first.dice_count}\n"
        f"Dados de {second.name}: {second.dice_count}\n"
        f"{_RULE}\n"
    )


def _receive_die(current: Player, opponent: Player, console: Console) -> None:
    if opponent.dice_count > 1:
        current.dice_count += 1
        opponent.dice_count -= 1
        console.write(f"{current.name} recibió un dado de {opponent.name}.\n")
    else:
        console.write(f"{opponent.name} no tiene suficientes dados para entregar.\n")
    console.sleep(2000)


def _choose_dice(
    current: Player, target: int, console: Console
) -> tuple[list[int], bool]:
    """Let the player pick dice; return the chosen values and whether they passed."""
    chosen: list[int] = []
    used: set[int] = set()
    partial = 0
    while len(chosen) < current.dice_count:
        console.sleep(500)
        console.clear()
        console.write(
            f"TURNO DE: {current.name}\n"
            f"NÚMERO OBJETIVO: {target}\n"
            f"Tu suma actual es de: {partial}\n"
            f"Dados disponibles: {format_values(current.dice)}  \n"
            f"Ingresá el número del dado #{len(chosen) + 1} que querés usar "
            f"(del 1 a {current.dice_count}): \n"
            "Si querés pasar de turno, ingresá 0.\n"
        )
        answer = console.read_line()
        try:
            position = int(answer.strip())
        except ValueError:
            console.write("Entrada inválida. Debe ser un número.\n")
            console.sleep(1000)
            console.clear()
            continue
        if position == 0:
            return chosen, True
        index = position - 1
        if not 0 <= index < current.dice_count:
            console.write("Posición inválida. Intente de nuevo.\n")
            console.sleep(1000)
            console.clear()
            continue
        if index in used:
            console.write("No podés repetir el dado, volvé a elegir\n")
            console.sleep(1000)
            console.clear()
            continue
        value = current.dice[index]
        chosen.append(value)
        used.add(index)
        partial += value
        console.clear()
        console.write(f"Elegiste el dado {value}\n")
        if partial == target:
            console.sleep(2000)
            break
    return chosen, False


def play_turn(
    current: Player,
    opponent: Player,
    rng: _RandomSource | None = None,
    console: Console | None = None,
) -> bool:
    """Play one turn for current; True if current ran out of dice and won."""
    source = _rng(rng)
    out = _console(console)
    out.clear()
    out.write(f"Turno de {current.name}\n")
    out.write(f"{current.name} tira el dado de 12 caras...\n")
    out.sleep(2000)
    first_die = source.randint(1, 12)
    out.write(f"{first_die}\n")
    out.write("Tirando otro dado de 12 caras...\n")
    out.sleep(2000)
    second_die = source.randint(1, 12)
    out.write(f"{second_die}\n")
    target = first_die + second_die
    out.write(f"El número objetivo es {target} del jugador {current.name}\n")
    out.sleep(2000)
    out.write(
        f"Ahora {current.name} tira los {current.dice_count} dados de 6 caras...\n"
    )
    current.dice = roll_dice(current.dice_count, source)
    out.sleep(2000)
    out.write(f"Dados obtenidos: {format_values(current.dice)}\n")
    out.sleep(2000)

    chosen, passed = _choose_dice(current, target, out)
    total = sum(chosen)

    if passed:
        out.write(
            f"El jugador {current.name} ha pasado su turno "
            "y finaliza su ronda como no exitosa\n"
        )
        _receive_die(current, opponent, out)
    elif total == target:
        out.write(f"Combinación elegida: {format_values(chosen)} ¡Es correcta!\n")
        current.score += total * len(chosen)
        opponent.dice_count += len(chosen)
        current.dice_count -= len(chosen)
        out.write(f"{current.name} entrega {len(chosen)} dado(s) a {opponent.name}.\n")
        out.sleep(2000)
        if current.dice_count <= 0:
            out.write(f"{current.name} se quedó sin dados y Ganó la partida!\n")
            current.score += WIN_BONUS
            out.sleep(2000)
            out.pause("")
            return True
    else:
        out.write(f"Combinación elegida: {format_values(chosen)}")
        out.sleep(2000)
        out.write(" Es incorrecta.\n")
        _receive_die(current, opponent, out)

    out.pause()
    return False


def play_match(
    first: Player,
    second: Player,
    rng: _RandomSource | None = None,
    console: Console | None = None,
) -> bool:
    """Play up to three rounds, first player first; True if someone won outright."""
    source = _rng(rng)
    out = _console(console)
    for round_number in range(1, ROUNDS + 1):
        out.clear()
        out.write(round_status(round_number, first, second))
        out.sleep(2000)
        out.clear()
        if play_turn(first, second, source, out):
            return True
        if play_turn(second, first, source, out):
            return True
    return False