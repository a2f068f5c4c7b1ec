from pystreamguide.dao.channel_retrieval.base import BaseChannelRetrieval
from pystreamguide.dao.channel_retrieval.file import FilePlaylistSource
from pystreamguide.dao.channel_retrieval.http import HttpPlaylistSource


def playlist_source_for(location: str, timeout: float = 30) -> BaseChannelRetrieval:
    if location.lower().startswith(("http://", "https://")):
        return HttpPlaylistSource(location, timeout=timeout)
    return FilePlaylistSource(location)
