import pytest

from session import SelectedFile, init_session


@pytest.fixture
def pdf():
    def make(name, data=b"%PDF-1.4 stub"):
        return SelectedFile(name=name, data=data)
    return make


@pytest.fixture
def state():
    s = {}
    init_session(s)
    return s


class FakeUpload:
    """Stands in for streamlit's UploadedFile."""

    def __init__(self, name, data=b"%PDF-1.4 stub"):
        self.name = name
        self._data = data

    def getvalue(self):
        return self._data


@pytest.fixture
def upload():
    return FakeUpload
