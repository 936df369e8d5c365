"""Games REST API: quizzes and trivia with leaderboards."""

__version__ = "1.0.0"
