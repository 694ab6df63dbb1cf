from dataclasses import asdict, dataclass


@dataclass
class Statistics:
    """Win/loss record fed by a round's outcome events."""

    total_games: int = 0
    games_won: int = 0
    current_streak: int = 0
    max_streak: int = 0

    def record(self, won: bool) -> None:
        self.total_games += 1
        if won:
            self.games_won += 1
            self.current_streak += 1
            self.max_streak = max(self.max_streak, self.current_streak)
        else:
            self.current_streak = 0

    @property
    def win_percentage(self) -> float:
        if not self.total_games:
            return 0.0
        return self.games_won / self.total_games * 100

    def to_dict(self) -> dict[str, int | float]:
        data: dict[str, int | float] = dict(asdict(self))
        data["win_percentage"] = self.win_percentage
        return data
