import logging
import os
import signal
import subprocess

from pystreamguide.players.base import BasePlayer

logger = logging.getLogger(__name__)


class VLCPlayer(BasePlayer):
    def __init__(self, vlc_path: str = "/usr/bin/cvlc") -> None:
        self.vlc_path = vlc_path
        self.current_process = None
        self.paused = False

    def play(self, url: str) -> None:
        try:
            self.stop()
            self.current_process = subprocess.Popen(
                [self.vlc_path, url],
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except OSError as e:
            logger.error(f"Failed to play URL {url} with VLC: {e}")
            self.current_process = None

    def toggle_pause(self) -> None:
        if not self.current_process:
            return
        sig = signal.SIGCONT if self.paused else signal.SIGSTOP
        try:
            os.kill(self.current_process.pid, sig)
            self.paused = not self.paused
        except ProcessLookupError:
            self.current_process = None
            self.paused = False

    def stop(self) -> None:
        """Stop the current playback"""
        if self.current_process:
            try:
                if self.paused:
                    os.kill(self.current_process.pid, signal.SIGCONT)
                os.kill(self.current_process.pid, signal.SIGTERM)
                self.current_process.wait(timeout=2)
            except (ProcessLookupError, subprocess.TimeoutExpired):
                try:
                    os.kill(self.current_process.pid, signal.SIGKILL)
                except ProcessLookupError:
                    pass  # Process already terminated
            finally:
                self.current_process = None
                self.paused = False

    def __del__(self):
        """Clean up when object is destroyed"""
        self.stop()
