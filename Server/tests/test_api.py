"""HTTP and WebSocket endpoint test cases."""

import unittest

from fakes import FakeWordProvider
from wordgame import create_app
from wordgame.config import TestingConfig
from wordgame.errors import WordFetchFailed
from wordgame.services.game_service import initialize_game_service


class ApiTestCase(unittest.TestCase):
    def setUp(self):
        self.provider = FakeWordProvider('APPLE', 'GRAPE')
        self.service = initialize_game_service(self.provider)
        self.app, self.socketio = create_app(TestingConfig)
        self.client = self.app.test_client()

    def new_game(self, **body):
        body.setdefault('language', 'en')
        body.setdefault('difficulty', 'medium')
        return self.client.post('/api/new_game', json=body)


class TestGameController(ApiTestCase):
    def test_settings(self):
        data = self.client.get('/api/settings').get_json()
        self.assertTrue(data['success'])
        self.assertEqual([lang['code'] for lang in data['languages']], ['en', 'es'])
        medium = [d for d in data['difficulties'] if d['code'] == 'medium'][0]
        self.assertEqual(medium['word_length'], 5)
        self.assertEqual(medium['max_attempts'], 6)

    def test_new_game(self):
        response = self.new_game()
        self.assertEqual(response.status_code, 200)
        data = response.get_json()
        self.assertTrue(data['success'])
        self.assertEqual(data['state']['status'], 'in_progress')
        self.assertIsNone(data['state']['answer'])
        self.assertIn(data['game_id'], self.service.games)

    def test_new_game_invalid_difficulty(self):
        response = self.new_game(difficulty='extreme')
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.get_json()['error_type'], 'InvalidGameSettings')

    def test_new_game_fetch_failure_then_retry(self):
        self.provider.queue = [WordFetchFailed('offline'), 'APPLE']
        response = self.new_game()
        self.assertEqual(response.status_code, 502)
        data = response.get_json()
        self.assertEqual(data['error_type'], 'WordFetchFailed')
        self.assertEqual(data['state']['status'], 'awaiting_word')

        game_id = data['game_id']
        guess = self.client.post(f'/api/game/{game_id}/guess', json={'guess': 'APPLE'})
        self.assertEqual(guess.status_code, 409)

        retry = self.client.post(f'/api/game/{game_id}/word')
        self.assertEqual(retry.status_code, 200)
        self.assertEqual(retry.get_json()['state']['status'], 'in_progress')

        again = self.client.post(f'/api/game/{game_id}/word')
        self.assertEqual(again.status_code, 409)

    def test_guess_flow(self):
        game_id = self.new_game().get_json()['game_id']

        response = self.client.post(f'/api/game/{game_id}/guess', json={'guess': 'plead'})
        self.assertEqual(response.status_code, 200)
        data = response.get_json()
        self.assertEqual(data['result'][0], ['P', 'PRESENT'])
        self.assertEqual(data['state']['attempts_used'], 1)

        response = self.client.post(f'/api/game/{game_id}/guess', json={'guess': 'apple'})
        data = response.get_json()
        self.assertEqual(data['state']['status'], 'won')
        self.assertEqual(data['state']['answer'], 'APPLE')
        self.assertEqual(data['state']['latest_guess_index'], 1)

        response = self.client.post(f'/api/game/{game_id}/guess', json={'guess': 'apple'})
        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.get_json()['error_type'], 'SessionNotActive')

    def test_guess_validation(self):
        game_id = self.new_game().get_json()['game_id']

        missing = self.client.post(f'/api/game/{game_id}/guess', json={})
        self.assertEqual(missing.status_code, 400)

        not_letters = self.client.post(f'/api/game/{game_id}/guess', json={'guess': '12345'})
        self.assertEqual(not_letters.status_code, 400)

        too_short = self.client.post(f'/api/game/{game_id}/guess', json={'guess': 'AB'})
        self.assertEqual(too_short.status_code, 400)
        self.assertEqual(too_short.get_json()['error_type'], 'InvalidGuessLength')

        state = self.client.get(f'/api/game/{game_id}/state').get_json()['state']
        self.assertEqual(state['attempts_used'], 0)

    def test_reset(self):
        game_id = self.new_game().get_json()['game_id']
        self.client.post(f'/api/game/{game_id}/guess', json={'guess': 'apple'})

        response = self.client.post(f'/api/game/{game_id}/reset')
        self.assertEqual(response.status_code, 200)
        state = response.get_json()['state']
        self.assertEqual(state['status'], 'in_progress')
        self.assertEqual(state['attempts_used'], 0)
        self.assertEqual(state['guesses'], [])

    def test_unknown_game(self):
        self.assertEqual(self.client.get('/api/game/missing/state').status_code, 404)
        guess = self.client.post('/api/game/missing/guess', json={'guess': 'APPLE'})
        self.assertEqual(guess.status_code, 404)
        self.assertEqual(self.client.post('/api/game/missing/reset').status_code, 404)

    def test_reset_fetch_failure_keeps_previous_round(self):
        self.provider.queue = ['APPLE', WordFetchFailed('offline')]
        game_id = self.new_game().get_json()['game_id']
        self.client.post(f'/api/game/{game_id}/guess', json={'guess': 'apple'})

        response = self.client.post(f'/api/game/{game_id}/reset')
        self.assertEqual(response.status_code, 502)
        self.assertEqual(response.get_json()['error_type'], 'WordFetchFailed')

        state = self.client.get(f'/api/game/{game_id}/state').get_json()['state']
        self.assertEqual(state['status'], 'won')
        self.assertEqual(state['guesses'], ['APPLE'])

    def test_new_game_rejects_non_object_body(self):
        response = self.client.post('/api/new_game', json=['en', 'medium'])
        self.assertEqual(response.status_code, 400)
        self.assertFalse(response.get_json()['success'])
        self.assertEqual(self.service.games, {})

    def test_new_game_rejects_non_string_settings(self):
        for body in [{'language': ['en']}, {'difficulty': {'level': 'hard'}}, {'difficulty': 5}]:
            response = self.new_game(**body)
            self.assertEqual(response.status_code, 400)
            self.assertEqual(response.get_json()['error_type'], 'InvalidGameSettings')
        self.assertEqual(self.service.games, {})

    def test_guess_rejects_non_object_body(self):
        game_id = self.new_game().get_json()['game_id']
        for body in ['guess', ['apple']]:
            response = self.client.post(f'/api/game/{game_id}/guess', json=body)
            self.assertEqual(response.status_code, 400)
        state = self.client.get(f'/api/game/{game_id}/state').get_json()['state']
        self.assertEqual(state['attempts_used'], 0)

    def test_delete_game(self):
        game_id = self.new_game().get_json()['game_id']
        self.assertEqual(self.client.delete(f'/api/game/{game_id}').status_code, 200)
        self.assertEqual(self.client.delete(f'/api/game/{game_id}').status_code, 404)

    def test_health(self):
        self.new_game()
        data = self.client.get('/api/health').get_json()
        self.assertEqual(data['status'], 'healthy')
        self.assertEqual(data['active_games'], 1)


class TestWebSocketHandlers(ApiTestCase):
    def setUp(self):
        super().setUp()
        self.ws = self.socketio.test_client(self.app)

    def tearDown(self):
        self.ws.disconnect()

    def last_event(self):
        received = self.ws.get_received()
        self.assertTrue(received)
        return received[-1]['name'], received[-1]['args'][0]

    def test_play_round(self):
        self.ws.emit('new_game', {'language': 'en', 'difficulty': 'medium'})
        name, payload = self.last_event()
        self.assertEqual(name, 'game_state')
        game_id = payload['game_id']

        self.ws.emit('submit_guess', {'game_id': game_id, 'guess': 'apple'})
        name, payload = self.last_event()
        self.assertEqual(name, 'game_state')
        self.assertEqual(payload['state']['status'], 'won')

        self.ws.emit('reset_game', {'game_id': game_id})
        name, payload = self.last_event()
        self.assertEqual(payload['state']['status'], 'in_progress')

        self.ws.emit('get_state', {'game_id': game_id})
        name, payload = self.last_event()
        self.assertEqual(payload['state']['attempts_used'], 0)

    def test_new_game_fetch_failure_then_reset(self):
        self.provider.queue = [WordFetchFailed('offline'), 'APPLE']
        self.ws.emit('new_game', {'language': 'en', 'difficulty': 'medium'})
        name, payload = self.last_event()
        self.assertEqual(name, 'error')
        self.assertEqual(payload['error_type'], 'WordFetchFailed')
        game_id = payload['game_id']
        self.assertEqual(self.service.get_game_state(game_id).status, 'awaiting_word')

        self.ws.emit('reset_game', {'game_id': game_id})
        name, payload = self.last_event()
        self.assertEqual(name, 'game_state')
        self.assertEqual(payload['state']['status'], 'in_progress')

    def test_new_game_uses_configured_defaults(self):
        self.app.config['DEFAULT_LANGUAGE'] = 'es'
        self.app.config['DEFAULT_DIFFICULTY'] = 'hard'
        self.provider.queue = ['CAMINO']
        self.ws.emit('new_game', {})
        name, payload = self.last_event()
        self.assertEqual(name, 'game_state')
        self.assertEqual(payload['state']['word_length'], 6)
        self.assertEqual(self.provider.calls, [('es', 6)])

    def test_invalid_guess_error_has_type(self):
        self.ws.emit('new_game', {'language': 'en', 'difficulty': 'medium'})
        game_id = self.last_event()[1]['game_id']
        self.ws.emit('submit_guess', {'game_id': game_id, 'guess': '12345'})
        name, payload = self.last_event()
        self.assertEqual(name, 'error')
        self.assertEqual(payload['error_type'], 'InvalidGuess')

    def test_non_object_payload(self):
        self.ws.emit('get_state', 'not-a-dict')
        name, payload = self.last_event()
        self.assertEqual(name, 'error')
        self.assertEqual(payload['error_type'], 'GameNotFound')

    def test_errors(self):
        self.ws.emit('submit_guess', {'game_id': 'missing', 'guess': 'apple'})
        name, payload = self.last_event()
        self.assertEqual(name, 'error')
        self.assertEqual(payload['error_type'], 'GameNotFound')

        self.ws.emit('new_game', {'language': 'en', 'difficulty': 'medium'})
        game_id = self.last_event()[1]['game_id']
        self.ws.emit('submit_guess', {'game_id': game_id, 'guess': 'ab'})
        name, payload = self.last_event()
        self.assertEqual(name, 'error')
        self.assertEqual(payload['error_type'], 'InvalidGuessLength')


if __name__ == '__main__':
    unittest.main()
