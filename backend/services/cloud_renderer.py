"""HTML rendering of tag clouds."""
from html import escape
from typing import List, Optional

from config import STYLESHEET_URLS
from models.tag_cloud import TagCloud


class CloudRenderer:
    """Renders a TagCloud as a standalone HTML page."""
    
    def __init__(self, stylesheet_urls: Optional[List[str]] = None):
        """
        Initialize CloudRenderer.
        
        Args:
            stylesheet_urls: CSS files linked from the page head; each defines
                the ``f{size}`` font classes (defaults to STYLESHEET_URLS)
        """
        self.stylesheet_urls = STYLESHEET_URLS if stylesheet_urls is None else stylesheet_urls
    
    def render(self, cloud: TagCloud) -> str:
        """Full page: header, cloud body and closing tags."""
        return self.render_header(cloud) + self.render_body(cloud) + self.render_footer()
    
    def render_header(self, cloud: TagCloud) -> str:
        title = f"Top {cloud.top_n} words in {escape(cloud.document_name)}"
        lines = [f"<html><head><title>{title}</title>"]
        for url in self.stylesheet_urls:
            lines.append(f'<link href="{escape(url)}" rel="stylesheet" type="text/css">')
        lines.append("</head>")
        lines.append(f"<body><h2>{title}</h2><hr>")
        return "\n".join(lines) + "\n"
    
    def render_body(self, cloud: TagCloud) -> str:
        lines = ['<div class="cdiv">', '<p class="cbox">']
        for word in cloud.words:
            lines.append(
                f'<span style="cursor:default" class="f{word.font_size}" '
                f'title="count:{word.count}">{escape(word.word)}</span>'
            )
        lines.append("</p>")
        lines.append("</div>")
        return "\n".join(lines) + "\n"
    
    def render_footer(self) -> str:
        return "</body>\n</html>\n"
