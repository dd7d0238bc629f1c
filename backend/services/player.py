"""HTML for the player and error pages."""

from html import escape

from services.adblock import adblock_script
from services.embed_source import force_https

IFRAME_ALLOW = (
    "autoplay; encrypted-media; fullscreen; picture-in-picture; "
    "accelerometer; gyroscope; clipboard-write"
)

_PLAYER_STYLE = """
    body, html {
      margin: 0;
      padding: 0;
      width: 100%;
      height: 100%;
      background-color: #000;
      overflow: hidden;
    }
    iframe {
      width: 100%;
      height: 100%;
      border: none;
      position: absolute;
      top: 0;
      left: 0;
      z-index: 1;
    }
    #loader {
      position: fixed;
      top: 0;
      left: 0;
      width: 100%;
      height: 100%;
      background-color: #000;
      display: flex;
      flex-direction: column;
      justify-content: center;
      align-items: center;
      z-index: 9999;
      transition: opacity 0.5s ease;
    }
    .spinner {
      width: 50px;
      height: 50px;
      border: 3px solid rgba(255,255,255,0.3);
      border-radius: 50%;
      border-top-color: #fff;
      animation: spin 1s ease-in-out infinite;
      margin-bottom: 20px;
    }
    .loading-text {
      color: rgba(255,255,255,0.7);
      font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
      font-size: 14px;
    }
    @keyframes spin {
      to { transform: rotate(360deg); }
    }
"""

_ERROR_STYLE = """
    * { margin: 0; padding: 0; box-sizing: border-box; }
    body {
      background: linear-gradient(135deg, #1a1a2e 0%, #16213e 100%);
      color: #fff;
      font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
      display: flex;
      align-items: center;
      justify-content: center;
      height: 100vh;
      overflow: hidden;
    }
    .error-container {
      text-align: center;
      padding: 40px 20px;
      max-width: 500px;
      animation: fadeIn 0.5s ease-in;
    }
    @keyframes fadeIn {
      from { opacity: 0; transform: translateY(-20px); }
      to { opacity: 1; transform: translateY(0); }
    }
    .icon {
      font-size: 80px;
      margin-bottom: 20px;
      animation: pulse 2s ease-in-out infinite;
    }
    @keyframes pulse {
      0%, 100% { opacity: 1; }
      50% { opacity: 0.5; }
    }
    h1 {
      font-size: 28px;
      font-weight: 600;
      margin-bottom: 15px;
      color: #e94560;
    }
    p {
      font-size: 16px;
      line-height: 1.6;
      color: #a8b2d1;
      margin-bottom: 25px;
    }
    .info-box {
      background: rgba(255, 255, 255, 0.05);
      border: 1px solid rgba(255, 255, 255, 0.1);
      border-radius: 10px;
      padding: 20px;
      margin-top: 20px;
    }
    .info-box p {
      font-size: 14px;
      margin-bottom: 0;
      color: #8892b0;
    }
    .retry-btn {
      display: inline-block;
      padding: 12px 30px;
      background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
      color: white;
      text-decoration: none;
      border-radius: 25px;
      font-weight: 500;
      transition: all 0.3s ease;
      margin-top: 10px;
    }
    .retry-btn:hover {
      transform: translateY(-2px);
      box-shadow: 0 5px 15px rgba(102, 126, 234, 0.4);
    }
"""

# Hide the spinner once the framed page has loaded.
_ONLOAD = (
    "document.getElementById('loader').style.opacity='0'; "
    "setTimeout(function() { document.getElementById('loader').style.display='none'; }, 500);"
)


def render_player(src: str, autoplay: bool = False, muted: bool = False) -> str:
    """Full-viewport player page framing ``src`` behind the ad blocker."""
    src = force_https(src)
    flags = " ".join(name for name, on in (("autoplay", autoplay), ("muted", muted)) if on)

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <meta http-equiv="Content-Security-Policy" content="upgrade-insecure-requests">
  <title>Video Player</title>
  <style>{_PLAYER_STYLE}</style>
  <script>{adblock_script()}</script>
</head>
<body>
  <div id="loader">
    <div class="spinner"></div>
    <div class="loading-text">Loading video...</div>
  </div>
  <iframe
    id="videoFrame"
    src="{escape(src, quote=True)}"
    allowfullscreen
    allow="{IFRAME_ALLOW}"
    {flags}
    onload="{_ONLOAD}"
  ></iframe>
</body>
</html>"""


def render_error_page(title: str, message: str) -> str:
    title = escape(title)
    message = escape(message)
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{title}</title>
  <style>{_ERROR_STYLE}</style>
</head>
<body>
  <div class="error-container">
    <div class="icon">🎬</div>
    <h1>{title}</h1>
    <p>{message}</p>
    <div class="info-box">
      <p>If this issue persists, please try again later.</p>
    </div>
    <a href="javascript:location.reload()" class="retry-btn">Retry</a>
  </div>
</body>
</html>"""
