DEFAULT_FILES = {
    "readme.txt": "Welcome to TCP Server!\nThis is a test file.",
    "config.ini": "[Settings]\nport=5566\nip=127.0.0.1",
    "data.txt": "Sample data file content",
}


class Storage:
    def __init__(self, seed=None):
        self._data = dict(DEFAULT_FILES if seed is None else seed)

    def get(self, name):
        return self._data.get(name)

    def set(self, name, content):
        self._data[name] = content

    def create(self, name):
        if name in self._data:
            return False
        self._data[name] = ""
        return True

    def append(self, name, text):
        content = self._data.get(name, "") + text
        self._data[name] = content
        return content

    def delete(self, name):
        if name in self._data:
            del self._data[name]
            return True
        return False

    def names(self):
        return list(self._data)

    def __contains__(self, name):
        return name in self._data

    def __len__(self):
        return len(self._data)
