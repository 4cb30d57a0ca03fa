import json

import click
from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO

from dugout.config import Config

socketio = SocketIO(async_mode=None)


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    allowed_origins = flask_app.config.get('CORS_ORIGINS') or []

    CORS(flask_app, supports_credentials=True, origins=allowed_origins)
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    from dugout.broadcast import BroadcastGateway
    from dugout.connections import ConnectionRegistry
    from dugout.content import StaticContentProvider
    from dugout.orchestrator import SessionOrchestrator
    from dugout.rooms import RoomStore
    from dugout.services.games import GameSettings
    from dugout.socketio_events import NAMESPACE, register_socketio_handlers

    cfg = flask_app.config
    store = RoomStore(
        ConnectionRegistry(),
        capacity=int(cfg.get('ROOM_CAPACITY', 8)),
        code_length=int(cfg.get('ROOM_CODE_LENGTH', 4)),
        code_attempts=int(cfg.get('ROOM_CODE_ATTEMPTS', 50)),
        logger=flask_app.logger,
    )
    run_task = socketio.start_background_task if cfg.get('LOAD_CONTENT_IN_BACKGROUND') else None
    flask_app.extensions['dugout'] = SessionOrchestrator(
        store,
        BroadcastGateway(socketio, namespace=NAMESPACE),
        cfg.get('CONTENT_PROVIDER') or StaticContentProvider(),
        settings=GameSettings.from_config(cfg),
        logger=flask_app.logger,
        run_task=run_task,
    )

    from dugout.main import main
    flask_app.register_blueprint(main)

    register_socketio_handlers()

    @click.command('content-preview')
    @click.argument('game_type', type=click.Choice(['quiz', 'grid', 'speedround']))
    def content_preview_command(game_type):
        """Print a freshly generated content package for a game type."""
        from dataclasses import asdict
        from dugout.services.games import load_content
        orchestrator = flask_app.extensions['dugout']
        content = load_content(orchestrator.provider, game_type, orchestrator.settings)
        if isinstance(content, list):
            data = [asdict(item) for item in content]
        else:
            data = {'categories': content.categories,
                    'challenges': {k: [asdict(q) for q in v] for k, v in content.challenges.items()}}
        click.echo(json.dumps(data, indent=2))

    flask_app.cli.add_command(content_preview_command)

    return flask_app
