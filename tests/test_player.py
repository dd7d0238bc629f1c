"""Tests for the player and error page HTML."""

from services.adblock import BLOCK_LIST, adblock_script
from services.player import IFRAME_ALLOW, render_error_page, render_player


def test_player_frames_source():
    html = render_player("https://example.com/e/abc")
    assert 'src="https://example.com/e/abc"' in html
    assert f'allow="{IFRAME_ALLOW}"' in html
    assert "upgrade-insecure-requests" in html
    assert "[Embed] Ad-blocking initialized" in html


def test_player_upgrades_http_source():
    html = render_player("http://example.com/e/abc")
    assert 'src="https://example.com/e/abc"' in html


def test_player_escapes_source():
    html = render_player('https://example.com/"><script>alert(1)</script>')
    assert "<script>alert(1)</script>" not in html
    assert "&quot;&gt;&lt;script&gt;" in html


def test_player_flags():
    plain = render_player("https://example.com/e/abc")
    assert "\n    autoplay" not in plain
    flagged = render_player("https://example.com/e/abc", autoplay=True, muted=True)
    assert "autoplay muted" in flagged


def test_error_page_escapes_text():
    html = render_error_page("Missing <URL>", "Use ?url= & retry")
    assert "<title>Missing &lt;URL&gt;</title>" in html
    assert "Use ?url= &amp; retry" in html
    assert "location.reload()" in html


def test_adblock_script_inlines_block_list():
    script = adblock_script()
    for pattern in BLOCK_LIST:
        assert f'"{pattern}"' in script
    assert "__BLOCK_LIST__" not in script
    assert "__AD_SELECTORS__" not in script
    assert "window.open = function()" in script
