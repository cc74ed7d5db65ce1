"""Interactive terminal front end for the Higher/Lower engine."""

import logging
from random import Random
from typing import Callable, Literal

from config import AppConfig, config
from higherlower.game import GameEvent, Guess, HigherLowerGame, TurnResult

logger = logging.getLogger(__name__)

QUIT = "quit"
Command = Guess | Literal["quit"]

SEPARATOR = "-------------------------------"

COMMANDS: dict[str, Command] = {
    "h": Guess.HIGHER,
    "higher": Guess.HIGHER,
    "l": Guess.LOWER,
    "lower": Guess.LOWER,
    "q": QUIT,
    "quit": QUIT,
}


def parse_command(text: str) -> Command | None:
    """Map a line of player input to a guess or quit, or None if unrecognised."""
    return COMMANDS.get(text.strip().lower())


class TerminalGame:
    """Read-evaluate loop that plays Higher/Lower over stdin/stdout."""

    def __init__(
        self,
        game: HigherLowerGame,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ) -> None:
        self.game = game
        self._input = input_fn
        self._output = output_fn

    def _ask(self, prompt: str) -> str | None:
        """Prompt for a line, returning None on EOF or Ctrl-C."""
        try:
            return self._input(prompt)
        except (EOFError, KeyboardInterrupt):
            return None

    def show_intro(self) -> None:
        self._output("Welcome to Higher / Lower")
        self._output(SEPARATOR + "\n")
        self._output("Guess if the challenging card is higher or lower than the current card.")
        self._output("Type: h if Higher, l if Lower, or q to quit")

    def show_table(self) -> None:
        """Print both face-up cards with the score and deck count."""
        self._output("\n" + SEPARATOR)
        self._output(f"Current Card:     {self.game.get_current_card()}")
        self._output(f"Challenging Card: {self.game.get_challenging_card()}")
        self._output(SEPARATOR + "\n")
        self._output(
            f"Score is now - {self.game.get_score()} / "
            f"There are {self.game.remaining_cards()} card(s) remaining."
        )

    def run(self) -> int:
        """
        Play until the player quits, declines a rematch or clears the deck.

        Returns:
            The score of the last game played
        """
        self.game.begin()
        self.show_intro()

        while True:
            self.show_table()

            line = self._ask("\nIs the challenging card higher or lower? (h / l / q): ")
            command = QUIT if line is None else parse_command(line)

            if command == QUIT:
                self._output("\nGoodbye!")
                return self.game.get_score()
            if command is None:
                self._output("Invalid input. Please type h, l, or q.\n")
                continue

            result = self.game.check_higher_or_lower(command)
            if not result.game_over:
                self._report_correct(result)
                continue
            reason = self.game.game_over_reason
            if reason is not None and reason.is_win:
                self._output(f"Correct! {result.reason}")
                self._output(f"Final score: {result.score}\n")
                return result.score

            self._output(f"\nIncorrect ({result.reason}). Your final score is: {result.score}\n")
            if not self._wants_rematch():
                self._output("Thanks for playing!")
                return result.score

            self.game.begin()
            self._output("-----------NEW GAME STARTING-----------")

    def _report_correct(self, result: TurnResult) -> None:
        if result.reason:
            self._output(result.reason)
        self._output(f"Correct, score is currently: {result.score}\n")
        self._output("-----------NEXT ROUND-----------")

    def _wants_rematch(self) -> bool:
        answer = self._ask("Play again? (y / n): ")
        return answer is not None and answer.strip().lower() in ("y", "yes")


def _log_event(event: GameEvent) -> None:
    logger.debug("%s", event)


def build_game(app_config: AppConfig = config) -> HigherLowerGame:
    """Create an engine seeded from configuration, logging its events in debug mode."""
    game = HigherLowerGame(rng=Random(app_config.game.seed))
    if app_config.debug:
        game.subscribe(_log_event)
    return game


def main() -> None:
    """Entry point for the terminal game."""
    logging.basicConfig(
        level=logging.DEBUG if config.debug else logging.WARNING,
        format=config.log_format,
    )
    TerminalGame(build_game()).run()


if __name__ == "__main__":
    main()
