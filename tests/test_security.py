#!/usr/bin/env python3
"""
Tests for the bearer-token authorization gate.

Run with:
    python -m pytest tests/test_security.py
"""
import time
import unittest
from unittest.mock import patch

import jwt

from games_api.config import auth
from games_api.core.errors import Forbidden, Unauthenticated
from games_api.core.security import (
    Identity, can_edit, decode_token, require_admin, require_authenticated,
)
from helpers import make_token


class TestDecodeToken(unittest.TestCase):

    def test_user_token(self):
        identity = decode_token(make_token('user123', 'user'))
        self.assertEqual(identity.user_id, 'user123')
        self.assertFalse(identity.is_admin)

    def test_admin_token(self):
        identity = decode_token(make_token('boss', auth.ADMIN_ROLE))
        self.assertTrue(identity.is_admin)

    def test_sub_claim_fallback(self):
        token = jwt.encode({'sub': 'abc'}, auth.JWT_SECRET, algorithm=auth.JWT_ALGORITHM)
        identity = decode_token(token)
        self.assertEqual(identity.user_id, 'abc')
        self.assertIsNone(identity.role)

    def test_expired_token(self):
        token = make_token('user123', 'user', exp=int(time.time()) - 60)
        with self.assertRaises(Unauthenticated) as ctx:
            decode_token(token)
        self.assertEqual(ctx.exception.detail, 'Token expired')

    def test_wrong_secret(self):
        token = jwt.encode({'id': 'x'}, auth.JWT_SECRET + '-other', algorithm=auth.JWT_ALGORITHM)
        with self.assertRaises(Unauthenticated):
            decode_token(token)

    def test_garbage(self):
        with self.assertRaises(Unauthenticated):
            decode_token('not-a-token')

    def test_token_without_user(self):
        token = jwt.encode({auth.ROLE_CLAIM: 'admin'}, auth.JWT_SECRET, algorithm=auth.JWT_ALGORITHM)
        with self.assertRaises(Unauthenticated):
            decode_token(token)


class TestCapabilityChecks(unittest.TestCase):

    def test_require_authenticated_rejects_anonymous(self):
        with self.assertRaises(Unauthenticated) as ctx:
            require_authenticated(None)
        self.assertEqual(ctx.exception.status_code, 401)
        self.assertEqual(ctx.exception.headers, {'WWW-Authenticate': 'Bearer'})

    def test_require_authenticated_passes_identity_through(self):
        identity = Identity('u1', 'user')
        self.assertIs(require_authenticated(identity), identity)

    def test_require_admin_rejects_user(self):
        with self.assertRaises(Forbidden) as ctx:
            require_admin(Identity('u1', 'user'))
        self.assertEqual(ctx.exception.status_code, 403)

    def test_require_admin_rejects_anonymous_as_unauthenticated(self):
        with self.assertRaises(Unauthenticated):
            require_admin(None)

    def test_require_admin_accepts_admin(self):
        identity = Identity('a1', auth.ADMIN_ROLE)
        self.assertIs(require_admin(identity), identity)


class TestEditPolicy(unittest.TestCase):

    def test_any_authenticated_caller_by_default(self):
        with patch.object(auth, 'EDIT_POLICY', 'authenticated'):
            self.assertTrue(can_edit(Identity('u1', 'user')))
            self.assertFalse(can_edit(None))

    def test_admin_policy(self):
        with patch.object(auth, 'EDIT_POLICY', 'admin'):
            self.assertFalse(can_edit(Identity('u1', 'user')))
            self.assertTrue(can_edit(Identity('a1', auth.ADMIN_ROLE)))


if __name__ == '__main__':
    unittest.main()
