from __future__ import annotations

import webbrowser


class BrowserShareSink:
    def open(self, url: str) -> bool:
        return webbrowser.open(url, new=2)
