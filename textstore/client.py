import socket

from .protocol import ENCODING


def send_command(command, host='127.0.0.1', port=5566, timeout=5.0):
    """
    Sends one command and returns the reply lines, without the welcome
    line the server opens every connection with.
    """
    with socket.create_connection((host, port), timeout=timeout) as s:
        with s.makefile('r', encoding=ENCODING, errors='replace', newline='\n') as stream:
            stream.readline()
            s.sendall(f"{command}\n".encode(ENCODING))
            s.shutdown(socket.SHUT_WR)
            return [line.rstrip("\n") for line in stream]
