import logging


def test_liveness_route(client):
    res = client.get('/')
    assert res.status_code == 200
    assert b'running' in res.data


def test_no_other_rest_surface(client):
    res = client.get('/api/rooms')
    assert res.status_code == 404


def test_factory_logs_socketio_namespace(caplog):
    from conftest import TestConfig
    from quizroom import create_app

    with caplog.at_level(logging.INFO, logger='quizroom'):
        create_app(TestConfig)
    assert any("namespace '/'" in r.getMessage() for r in caplog.records if r.name == 'quizroom')
