NAMESPACE = '/ws'


def test_index(client):
    res = client.get('/')
    assert res.status_code == 200
    assert 'message' in res.get_json()


def test_health_counts_rooms(client, sio_client):
    assert client.get('/health').get_json() == {'status': 'ok', 'rooms': 0}
    sio_client.emit('create_room', {'player_name': 'Alice', 'game_type': 'grid'}, namespace=NAMESPACE)
    assert client.get('/health').get_json()['rooms'] == 1


def test_room_snapshot(client, sio_client):
    assert client.get('/api/rooms/ZZZZ').status_code == 404

    sio_client.emit('create_room', {'player_name': 'Alice', 'game_type': 'grid'}, namespace=NAMESPACE)
    created = [p['args'][0] for p in sio_client.get_received(NAMESPACE) if p['name'] == 'room_created'][0]
    code = created['room_code']

    res = client.get(f'/api/rooms/{code.lower()}')
    assert res.status_code == 200
    room = res.get_json()
    assert room['code'] == code
    assert room['game_type'] == 'grid'
    assert room['state'] is None

    sio_client.emit('start_game', namespace=NAMESPACE)
    state = client.get(f'/api/rooms/{code}').get_json()['state']
    assert state['type'] == 'grid'
    assert state['board'] == [None] * 9
    assert state['categories'] == [f'C{i}' for i in range(9)]


def test_content_preview_command(flask_app):
    runner = flask_app.test_cli_runner()
    result = runner.invoke(args=['content-preview', 'speedround'])
    assert result.exit_code == 0
    assert '"title": "R1"' in result.output
