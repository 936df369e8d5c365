import time
import uuid

# columns a game document can be looked up by
SEARCHABLE_FIELDS = ('id', 'name', 'type')
# columns PUT may change
UPDATABLE_FIELDS = ('name', 'image', 'points', 'questions')

def new_game_id() -> str:
    return uuid.uuid4().hex

class GameRec:
    """A stored game document"""
    __slots__ = ('id', 'name', 'image', 'type', 'points', 'questions', 'leaderboard',
                 'created_at', 'updated_at')
    def __init__(self, data: dict):
        self.id = data.get('id') or new_game_id()
        self.name = data['name']
        self.image = data['image']
        self.type = data['type']
        self.points = int(data['points'])
        self.questions = list(data.get('questions') or [])
        self.leaderboard = list(data.get('leaderboard') or [])
        now = time.time()
        self.created_at = float(data.get('created_at') or now)
        self.updated_at = float(data.get('updated_at') or self.created_at)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'image': self.image,
            'type': self.type,
            'points': self.points,
            'questions': self.questions,
            'leaderboard': self.leaderboard,
            'created_at': self.created_at,
            'updated_at': self.updated_at
        }

def ranked_leaderboard(entries: list) -> list:
    """Leaderboard entries ordered by points, highest first"""
    return sorted(entries, key=lambda entry: entry.get('points', 0), reverse=True)

def summary_view(doc: dict) -> dict:
    return {
        'id': doc['id'],
        'name': doc['name'],
        'image': doc['image'],
        'type': doc['type']
    }

def detail_view(doc: dict) -> dict:
    return {
        'id': doc['id'],
        'name': doc['name'],
        'image': doc['image'],
        'type': doc['type'],
        'points': doc['points'],
        'questions': doc.get('questions') or [],
        'leaderboard': ranked_leaderboard(doc.get('leaderboard') or [])
    }
