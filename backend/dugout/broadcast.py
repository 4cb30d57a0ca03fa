class BroadcastGateway:
    """The only writer of outbound Socket.IO messages.

    Room-wide events go to the Socket.IO room `room:<code>`; private
    events go to a single connection id.
    """

    def __init__(self, socketio, namespace='/ws'):
        self.socketio = socketio
        self.namespace = namespace

    @staticmethod
    def channel(room_code: str) -> str:
        return f"room:{room_code}"

    def enroll(self, sid: str, room_code: str) -> None:
        self.socketio.server.enter_room(sid, self.channel(room_code), namespace=self.namespace)

    def withdraw(self, sid: str, room_code: str) -> None:
        self.socketio.server.leave_room(sid, self.channel(room_code), namespace=self.namespace)

    def broadcast(self, room_code: str, event: str, payload: dict) -> None:
        self.socketio.emit(event, payload, to=self.channel(room_code), namespace=self.namespace)

    def send(self, sid: str, event: str, payload: dict) -> None:
        self.socketio.emit(event, payload, to=sid, namespace=self.namespace)
