"""Static homepage documenting the player endpoints."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter()

# Sample id used by the "Test This Endpoint" links
DEMO_VIDEO_URL = "https://hglink.to/e/0tmqi4jmtowr"
DEMO_VIDEO_ID = "0tmqi4jmtowr"

HOMEPAGE_HTML = f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Clean Video Player API</title>
  <style>
    * {{ margin: 0; padding: 0; box-sizing: border-box; }}
    body {{
      font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
      background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
      min-height: 100vh;
      display: flex;
      align-items: center;
      justify-content: center;
      padding: 20px;
    }}
    .container {{
      max-width: 900px;
      width: 100%;
      background: white;
      border-radius: 20px;
      padding: 40px;
      box-shadow: 0 20px 60px rgba(0,0,0,0.3);
    }}
    h1 {{ color: #333; margin-bottom: 10px; font-size: 36px; }}
    .subtitle {{ color: #666; margin-bottom: 30px; font-size: 18px; }}
    .api-section {{
      background: #f8f9fa;
      padding: 25px;
      border-radius: 12px;
      margin-bottom: 20px;
      border-left: 4px solid #667eea;
    }}
    .api-section h3 {{ color: #333; margin-bottom: 15px; font-size: 20px; }}
    .endpoint {{
      background: white;
      padding: 15px;
      border-radius: 8px;
      margin-bottom: 15px;
      border: 1px solid #e0e0e0;
    }}
    .method {{
      display: inline-block;
      background: #28a745;
      color: white;
      padding: 4px 12px;
      border-radius: 4px;
      font-size: 12px;
      font-weight: 600;
      margin-right: 10px;
    }}
    .path {{ font-family: 'Courier New', monospace; color: #667eea; font-weight: 600; }}
    .description {{ color: #666; margin-top: 10px; line-height: 1.6; }}
    .example {{
      background: #2d3748;
      color: #e2e8f0;
      padding: 15px;
      border-radius: 8px;
      margin-top: 10px;
      font-family: 'Courier New', monospace;
      font-size: 14px;
      overflow-x: auto;
      white-space: pre;
    }}
    .badge {{
      display: inline-block;
      background: #28a745;
      color: white;
      padding: 5px 15px;
      border-radius: 12px;
      font-size: 12px;
      font-weight: 600;
      margin-bottom: 20px;
    }}
    .test-btn {{
      display: inline-block;
      background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
      color: white;
      padding: 10px 20px;
      border-radius: 8px;
      text-decoration: none;
      font-weight: 500;
      margin-top: 10px;
      transition: transform 0.2s;
    }}
    .test-btn:hover {{ transform: translateY(-2px); }}
  </style>
</head>
<body>
  <div class="container">
    <div class="badge">✓ API Ready</div>
    <h1>🎬 Video Player API</h1>
    <p class="subtitle">Clean, ad-free video embedding with query parameters</p>

    <div class="api-section">
      <h3>📡 API Endpoints</h3>

      <div class="endpoint">
        <div><span class="method">GET</span><span class="path">/api/embed.js</span></div>
        <p class="description">Get video player with query parameters</p>
        <div class="example">/api/embed.js?url=VIDEO_URL&amp;autoplay=true</div>
        <a href="/api/embed.js?url={DEMO_VIDEO_URL}" class="test-btn" target="_blank">Test This Endpoint</a>
      </div>

      <div class="endpoint">
        <div><span class="method">GET</span><span class="path">/api/source/:id</span></div>
        <p class="description">Get video source information (JSON response)</p>
        <div class="example">/api/source/{DEMO_VIDEO_ID}</div>
        <a href="/api/source/{DEMO_VIDEO_ID}" class="test-btn" target="_blank">Test This Endpoint</a>
      </div>

      <div class="endpoint">
        <div><span class="method">GET</span><span class="path">/embed/:id</span></div>
        <p class="description">Direct embed player (path parameter)</p>
        <div class="example">/embed/{DEMO_VIDEO_URL}</div>
        <a href="/embed/{DEMO_VIDEO_URL}" class="test-btn" target="_blank">Test This Endpoint</a>
      </div>
    </div>

    <div class="api-section">
      <h3>📖 Query Parameters</h3>
      <div class="endpoint">
        <p class="description">
          <strong>url</strong> - Video URL to embed (required)<br>
          <strong>autoplay</strong> - Enable autoplay (optional, default: false)<br>
          <strong>muted</strong> - Start muted (optional, default: false)
        </p>
        <div class="example">/api/embed.js?url={DEMO_VIDEO_URL}&amp;autoplay=true&amp;muted=true</div>
      </div>
    </div>

    <div class="api-section">
      <h3>🔧 Usage in HTML</h3>
      <div class="example">&lt;iframe
  src="https://your-app.example.com/api/embed.js?url=VIDEO_URL"
  width="100%"
  height="500"
  frameborder="0"
  allowfullscreen
&gt;&lt;/iframe&gt;</div>
    </div>
  </div>
</body>
</html>"""


@router.get("/", response_class=HTMLResponse)
async def homepage() -> HTMLResponse:
    return HTMLResponse(HOMEPAGE_HTML)
