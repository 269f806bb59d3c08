"""
Tests for the session configuration and the move service client.
"""

import json
from unittest import TestCase, main

import httpx

from hexfortyeight.config import SessionConfig, build_url
from hexfortyeight.core import Board, Coordinate, create_grid
from hexfortyeight.remote import MoveClient, RemoteMoveError, decode_cells, encode_board


class TestSessionConfig(TestCase):
    """Session parameters and endpoint URL."""

    def test_localhost_url(self):
        """Localhost uses http and keeps the port."""
        self.assertEqual(build_url('localhost', 2, '13337'), 'http://localhost:13337/2')

    def test_remote_url(self):
        """Other hosts use https and drop the port."""
        self.assertEqual(build_url('xxx', 2, '13337'), 'https://xxx/2')

    def test_localhost_without_port(self):
        self.assertEqual(build_url('localhost', 4, None), 'http://localhost/4')

    def test_config_url(self):
        config = SessionConfig(radius=3, hostname='localhost', port='8080')
        self.assertEqual(config.url, 'http://localhost:8080/3')

    def test_invalid_config(self):
        for kwargs in ({'radius': 1}, {'radius': 7}, {'radius': 2.0}, {'hostname': ''}, {'timeout': 0}):
            with self.assertRaises(ValueError):
                SessionConfig(**kwargs)

    def test_config_is_immutable(self):
        config = SessionConfig()
        with self.assertRaises(AttributeError):
            config.radius = 3


class TestPayloads(TestCase):
    """Request and response bodies."""

    def test_encode_board_skips_empty_tiles(self):
        board = Board.from_cells(2, [((0, 0, 0), 4), ((1, -1, 0), 2)])
        self.assertEqual(
            encode_board(board), [{'x': 0, 'y': 0, 'z': 0, 'value': 4}, {'x': 1, 'y': -1, 'z': 0, 'value': 2}]
        )

    def test_encode_empty_board(self):
        self.assertEqual(encode_board(create_grid(3)), [])

    def test_decode_cells(self):
        cells = decode_cells([{'x': 1, 'y': 0, 'z': -1, 'value': 2, 'id': 7}])
        self.assertEqual(cells, [(Coordinate(1, 0, -1), 2)])

    def test_decode_malformed(self):
        """Anything other than a list of coordinate and value objects is rejected."""
        for payload in (
            {'x': 0},
            'cells',
            [{'x': 0, 'y': 0, 'z': 0}],
            [{'x': '0', 'y': 0, 'z': 0, 'value': 2}],
            [{'x': 0, 'y': 0, 'z': 0, 'value': True}],
            [[0, 0, 0, 2]],
        ):
            with self.assertRaises(RemoteMoveError):
                decode_cells(payload)

    def test_decode_out_of_range_values(self):
        """Values must be empty or a power of two small enough for the board."""
        self.assertEqual(decode_cells([{'x': 0, 'y': 0, 'z': 0, 'value': 0}]), [(Coordinate(0, 0, 0), 0)])
        self.assertEqual(decode_cells([{'x': 0, 'y': 0, 'z': 0, 'value': 2**62}]), [(Coordinate(0, 0, 0), 2**62)])
        for value in (2**63, 2**70, -2, 1, 3, 6):
            with self.assertRaises(RemoteMoveError):
                decode_cells([{'x': 0, 'y': 0, 'z': 0, 'value': value}])


class TestMoveClient(TestCase):
    """HTTP exchanges with the move service."""

    def setUp(self):
        self.requests = []

    def make_client(self, handler) -> MoveClient:
        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        return MoveClient('http://localhost:13337/2', transport=httpx.MockTransport(record))

    def test_initial_request(self):
        """Opening a game posts an empty list."""
        client = self.make_client(lambda request: httpx.Response(200, json=[{'x': 0, 'y': 0, 'z': 0, 'value': 2}]))

        with client:
            cells = client.resolve()

        self.assertEqual(cells, [((0, 0, 0), 2)])
        self.assertEqual(self.requests[0].method, 'POST')
        self.assertEqual(str(self.requests[0].url), 'http://localhost:13337/2')
        self.assertEqual(json.loads(self.requests[0].content), [])

    def test_move_request(self):
        """A move posts the non-empty tiles of the board."""
        board = Board.from_cells(2, [((0, -1, 1), 4)])
        client = self.make_client(lambda request: httpx.Response(200, json=json.loads(request.content)))

        with client:
            cells = client.resolve(board)

        self.assertEqual(json.loads(self.requests[0].content), [{'x': 0, 'y': -1, 'z': 1, 'value': 4}])
        self.assertEqual(self.requests[0].headers['content-type'], 'application/json')
        self.assertEqual(cells, [((0, -1, 1), 4)])

    def test_server_error(self):
        client = self.make_client(lambda request: httpx.Response(500, text='boom'))
        with client, self.assertRaises(RemoteMoveError) as context:
            client.resolve()
        self.assertIsInstance(context.exception.__cause__, httpx.HTTPStatusError)

    def test_transport_error(self):
        def handler(request):
            raise httpx.ConnectError('connection refused', request=request)

        client = self.make_client(handler)
        with client, self.assertRaises(RemoteMoveError):
            client.resolve()

    def test_invalid_json(self):
        client = self.make_client(lambda request: httpx.Response(200, text='not json'))
        with client, self.assertRaises(RemoteMoveError):
            client.resolve()


if __name__ == '__main__':
    main()
