"""Server-rendered HTML pages for creating and viewing shares."""

from datetime import datetime
from string import Template
from urllib.parse import quote

from share_api.repositories.file_share_repository import FileShare
from share_api.repositories.text_share_repository import TextShare
from share_api.services.access_resolver import ViewNotice, ViewSession, ViewState
from share_api.types import ShareResult
from share_api.utils import format_file_size

_STYLE = """
    * { margin: 0; padding: 0; box-sizing: border-box; }
    body {
      font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, 'Helvetica Neue', Arial, sans-serif;
      background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
      min-height: 100vh; padding: 20px;
      display: flex; align-items: center; justify-content: center;
    }
    .container {
      background: white; border-radius: 16px; max-width: 800px; width: 100%; overflow: hidden;
      box-shadow: 0 25px 50px -12px rgba(0, 0, 0, 0.25);
    }
    .header { background: linear-gradient(135deg, #1a1a2e 0%, #16213e 100%); color: white; padding: 24px 32px; }
    .header h1 { font-size: 24px; font-weight: 600; margin-bottom: 8px; }
    .header p { font-size: 14px; opacity: 0.8; }
    .content { padding: 32px; }
    .message { font-size: 18px; line-height: 1.8; color: #333; white-space: pre-wrap; word-wrap: break-word; }
    .error { color: #b91c1c; margin-top: 8px; }
    .footer { border-top: 1px solid #eee; padding: 16px 32px; text-align: center; color: #888; font-size: 12px; }
    form { display: flex; flex-direction: column; gap: 12px; margin-bottom: 24px; }
    textarea, input { padding: 10px; font-size: 16px; border: 1px solid #ccc; border-radius: 8px; }
    button, .button { padding: 10px 16px; background: #1a1a2e; color: white; border: none;
                      border-radius: 8px; text-decoration: none; cursor: pointer; }
    @media print {
      body { background: white; padding: 0; }
      .container { box-shadow: none; border-radius: 0; }
    }
"""

_PAGE = Template("""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>$title</title>
  <style>$style</style>
</head>
<body>
  <div class="container">
    <div class="header">
      <h1>$heading</h1>
      <p>$subheading</p>
    </div>
    <div class="content">
$body
    </div>
    <div class="footer">
      Shared via QR Share
    </div>
  </div>
</body>
</html>""")

_PASSWORD_FORM = Template("""      <form method="post" action="$action">
        <label for="password">This share is password protected.</label>
        <input type="password" id="password" name="password" autofocus>
        <button type="submit">Unlock</button>
        $error
      </form>""")

# Submit buttons are disabled while a request is in flight.
_BUSY_SCRIPT = """      <script>
        document.querySelectorAll('form').forEach(function (form) {
          form.addEventListener('submit', function () {
            form.querySelectorAll('button').forEach(function (b) { b.disabled = true; });
          });
        });
      </script>"""


def escape_html(text: str) -> str:
    """
    Escape text for embedding in HTML; newlines become line breaks.
    """
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#039;")
        .replace("\n", "<br>")
    )


def format_timestamp(value: datetime) -> str:
    """Format a timestamp in the server's locale, converted to local time."""
    return value.astimezone().strftime("%x, %X")


def _page(title: str, heading: str, subheading: str, body: str) -> str:
    return _PAGE.substitute(
        title=escape_html(title),
        style=_STYLE,
        heading=escape_html(heading),
        subheading=escape_html(subheading),
        body=body,
    )


def render_text_artifact(share: TextShare) -> str:
    """
    Standalone page showing a text share's content and creation time.
    """
    body = f'      <div class="message">{escape_html(share.content)}</div>'
    return _page(
        "Shared Message",
        "\U0001F4C4 Shared Message",
        f"Created: {format_timestamp(share.created_at)}",
        body,
    )


def render_error_page(message: str) -> str:
    return _page("Error", "Error", "", f'      <p class="error">{escape_html(message)}</p>')


def _render_gate(action: str, notice_or_error: str) -> str:
    error = f'<p class="error">{escape_html(notice_or_error)}</p>' if notice_or_error else ""
    return _PASSWORD_FORM.substitute(action=escape_html(action), error=error) + "\n" + _BUSY_SCRIPT


def _gate_message(session: ViewSession, error: str) -> str:
    if error:
        return error
    if session.notice is ViewNotice.WRONG_PASSWORD:
        return "Incorrect password"
    return ""


def render_text_view(session: ViewSession, error: str = "") -> str:
    """
    Page for /view: terminal error, password prompt, or the message itself.
    """
    if session.state in (ViewState.ERROR, ViewState.NOT_FOUND, ViewState.LOADING):
        return render_error_page(session.error or "Message not found")

    share = session.record
    subheading = f"Created: {format_timestamp(share.created_at)}"
    if session.state is ViewState.GATED:
        action = f"/view?id={quote(share.id)}"
        body = _render_gate(action, _gate_message(session, error))
        return _page("Shared Message", "\U0001F512 Protected Message", subheading, body)

    # Content goes into a preformatted block; newlines are kept by the CSS.
    content = share.content.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")
    body = f'      <pre class="message">{content}</pre>'
    return _page("Shared Message", "\U0001F4C4 Shared Message", subheading, body)


def render_file_view(session: ViewSession, error: str = "") -> str:
    """
    Page for /view-file: terminal error, password prompt, or a download link.
    """
    if session.state in (ViewState.ERROR, ViewState.NOT_FOUND, ViewState.LOADING):
        return render_error_page(session.error or "File not found")

    share: FileShare = session.record
    subheading = f"Created: {format_timestamp(share.created_at)}"
    if session.state is ViewState.GATED:
        action = f"/view-file?id={quote(share.id)}"
        body = _render_gate(action, _gate_message(session, error))
        return _page("Shared File", "\U0001F512 Protected File", subheading, body)

    body = (
        f'      <p class="message">{escape_html(share.file_name)}</p>\n'
        f'      <p>{escape_html(format_file_size(share.file_size))} &middot; {escape_html(share.file_type)}</p>\n'
        f'      <p><a class="button" href="{escape_html(share.public_url)}" download>Download file</a></p>'
    )
    return _page("Shared File", "\U0001F4CE Shared File", subheading, body)


def render_home(error: str = "") -> str:
    """Entry page with the text and file share forms."""
    error_html = f'      <p class="error">{escape_html(error)}</p>\n' if error else ""
    body = error_html + """      <form method="post" action="/share/text">
        <textarea name="content" rows="6" placeholder="Type a message to share"></textarea>
        <input type="password" name="password" placeholder="Optional password">
        <button type="submit">Create QR code</button>
      </form>
      <form method="post" action="/share/file" enctype="multipart/form-data">
        <input type="file" name="file">
        <input type="password" name="password" placeholder="Optional password">
        <button type="submit">Upload and create QR code</button>
      </form>
      <p>PDF, images, videos, audio, documents up to 50MB</p>
""" + _BUSY_SCRIPT
    return _page("QR Share", "QR Share", "Share a message or a file with a QR code", body)


def render_share_result(result: ShareResult) -> str:
    """
    Result page: QR image, PDF download, copy-link button and the link itself.
    """
    url = escape_html(result.view_url)
    encoded_url = quote(result.view_url, safe="")
    encoded_label = quote(result.display_name, safe="")
    body = f"""      <p><img src="/api/qr?url={encoded_url}" alt="QR Code" width="280" height="280"></p>
      <p>Scan to view</p>
      <p class="message">{escape_html(result.display_name)}</p>
      <p>
        <a class="button" href="/api/qr/pdf?url={encoded_url}&amp;label={encoded_label}">Download PDF</a>
        <button type="button" id="copy" data-url="{url}">Copy Link</button>
      </p>
      <p id="copy-status"></p>
      <p><a href="{url}" target="_blank" rel="noopener noreferrer">{url}</a></p>
      <script>
        document.getElementById('copy').addEventListener('click', function (event) {{
          var status = document.getElementById('copy-status');
          navigator.clipboard.writeText(event.target.dataset.url).then(
            function () {{ status.textContent = 'Link copied to clipboard!'; }},
            function () {{ status.textContent = 'Failed to copy link'; }}
          );
        }});
      </script>"""
    return _page("QR Share", "Your QR code is ready", "", body)
