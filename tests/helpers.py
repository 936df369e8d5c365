"""Shared fixtures for the games API tests."""
import copy
import time

import jwt

from games_api.config import auth
from games_api.database import InMemoryGameStore
from games_api.main import create_app


def make_token(user_id='user123', role='user', **extra_claims) -> str:
    claims = {'id': user_id, auth.ROLE_CLAIM: role}
    claims.update(extra_claims)
    return jwt.encode(claims, auth.JWT_SECRET, algorithm=auth.JWT_ALGORITHM)


def bearer(token: str) -> dict:
    return {'Authorization': f'Bearer {token}'}


ADMIN = bearer(make_token('admin1', auth.ADMIN_ROLE))
USER = bearer(make_token('user123', 'user'))

QUIZ_A = {
    'name': 'Quiz A',
    'image': 'http://x/img.png',
    'type': 'Quiz',
    'points': 100,
    'questions': [
        {'questionID': 'q1', 'question': '2+2?', 'options': ['3', '4'], 'answer': '4'},
    ],
}

ADVENTURE = {
    'name': 'Aventuras no Mundo dos Jogos',
    'image': 'https://phyrowns.sirv.com/Aventura/Adventure001.jpg',
    'type': 'Aventura',
    'points': 50,
    'questions': [
        {'questionID': 'q1', 'question': 'Qual é a capital da França?',
         'options': ['Paris', 'Londres', 'Berlim', 'Madrid'], 'answer': 'Paris'},
        {'questionID': 'q2', 'question': 'Qual é o maior planeta do Sistema Solar?',
         'options': ['Terra', 'Marte', 'Júpiter', 'Saturno'], 'answer': 'Júpiter'},
    ],
}


def payload(base=QUIZ_A, **overrides) -> dict:
    body = copy.deepcopy(base)
    body.update(overrides)
    return body


def stored_game(**overrides) -> dict:
    """A document as the store would hold it"""
    doc = payload(leaderboard=[], created_at=time.time())
    doc.update(overrides)
    return doc


def make_app(store=None):
    store = store if store is not None else InMemoryGameStore()
    return create_app(store=store), store
