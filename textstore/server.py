import socket
import threading

from .engine import StoreEngine
from .protocol import ENCODING, format_response


class Server:
    """
    TCP transport for a StoreEngine: one thread per connection, one
    command per line, each reply line terminated by a newline.
    """

    def __init__(self, host='127.0.0.1', port=5566, engine=None):
        self.host = host
        self.port = port
        self.engine = StoreEngine() if engine is None else engine
        self._socket = None
        self._shutdown_event = threading.Event()

    def bind(self):
        self._socket = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        self._socket.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        self._socket.bind((self.host, self.port))
        self._socket.listen()
        # lets serve_forever notice shutdown() between accepts
        self._socket.settimeout(0.5)
        self.host, self.port = self._socket.getsockname()[:2]
        print(f"Listening on {self.host}:{self.port}")
        return self.host, self.port

    def serve_forever(self):
        if self._socket is None:
            self.bind()
        try:
            while not self._shutdown_event.is_set():
                try:
                    conn, addr = self._socket.accept()
                except socket.timeout:
                    continue
                except OSError:
                    if self._shutdown_event.is_set():
                        break
                    raise
                print(f"Connection from {addr}")
                threading.Thread(
                    target=self.handle_connection, args=(conn, addr), daemon=True
                ).start()
        finally:
            self._close()

    def shutdown(self):
        self._shutdown_event.set()

    def _close(self):
        if self._socket is not None:
            self._socket.close()
            self._socket = None
        print("Server stopped.")

    def handle_connection(self, conn, addr):
        with conn:
            try:
                self._send(conn, [self.engine.welcome()])
                with conn.makefile('r', encoding=ENCODING, errors='replace', newline='\n') as stream:
                    for line in stream:
                        print(f"received: {line.rstrip()}")
                        self._send(conn, self.engine.execute(line))
            except ConnectionError:
                print(f"Connection lost with {addr}")
                return
        print(f"Client disconnected {addr}")

    def _send(self, conn, lines):
        conn.sendall(format_response(lines).encode(ENCODING))
