from pydantic import BaseModel
from typing import List, Literal

class Question(BaseModel):
    questionID: str
    question: str
    options: List[str]
    answer: str

class LeaderboardEntry(BaseModel):
    userID: str
    points: int

class GameSummary(BaseModel):
    id: str
    name: str
    image: str
    type: str

class GameDetail(BaseModel):
    id: str
    name: str
    image: str
    type: str
    points: int
    questions: List[Question]
    leaderboard: List[LeaderboardEntry]

class HealthResponse(BaseModel):
    status: Literal["healthy"] = "healthy"
    uptime: float
    storage: Literal["up", "down"]
