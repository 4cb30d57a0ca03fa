import os


def _origins():
    raw = os.environ.get('CORS_ORIGINS')
    if raw:
        return [o.strip() for o in raw.split(',') if o.strip()]
    return [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
        "http://localhost:5174",
        "http://127.0.0.1:5174",
    ]


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    CORS_ORIGINS = _origins()
    # Room limits
    ROOM_CAPACITY = int(os.environ.get('ROOM_CAPACITY', '8'))
    ROOM_CODE_LENGTH = int(os.environ.get('ROOM_CODE_LENGTH', '4'))
    ROOM_CODE_ATTEMPTS = int(os.environ.get('ROOM_CODE_ATTEMPTS', '50'))
    # Game content sizes
    QUIZ_QUESTION_COUNT = int(os.environ.get('QUIZ_QUESTION_COUNT', '10'))
    SPEEDROUND_MAX_ROUNDS = int(os.environ.get('SPEEDROUND_MAX_ROUNDS', '5'))
    # Points for a correct quiz or grid answer
    CORRECT_ANSWER_POINTS = int(os.environ.get('CORRECT_ANSWER_POINTS', '100'))
    # Fetch content in a Socket.IO background task. Tests load inline.
    LOAD_CONTENT_IN_BACKGROUND = os.environ.get('LOAD_CONTENT_IN_BACKGROUND', '1') not in ('0', 'false', 'False')
