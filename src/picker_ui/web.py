from __future__ import annotations
import logging
from flask import Flask, request, jsonify, Response
from werkzeug.serving import make_server
from picker.engine import Engine
from picker.config import TOP_K
from picker.models import (
    Cancel, Confirm, ConfirmQuery, ItemClicked, MoveSelection, QueryChanged, ReportViewport, Snapshot,
)

log = logging.getLogger(__name__)

app = Flask(__name__)
_engine: Engine | None = None


def _require_engine() -> Engine:
    if _engine is None:
        raise RuntimeError("Web UI has no engine. Call serve(engine) or set picker_ui.web._engine.")
    return _engine


def _payload(eng: Engine, snap: Snapshot, k: int) -> dict:
    """
    Everything the page draws: the first k rows (always reaching the selected
    row), the selection and the pending scroll target, if any.
    """
    view, nav = snap.view, snap.navigation
    end = max(0, k, nav.selected + 1)
    rows = [
        {"view_index": i, "index": it.index, "plugin": it.plugin, "text": it.text,
         "raw": it.raw, "positions": list(view.positions_at(i))}
        for i, it in enumerate(view.items[:end])
    ]
    return {
        "query": snap.query, "total": snap.total, "matched": len(view),
        "highlight": eng.config.highlight_matches,
        "selected": nav.selected, "scroll_target": nav.scroll_target,
        "scroll": eng.nav.consume_scroll(),
        "done": eng.done, "result": eng.result, "rows": rows,
    }


def _int_arg(data: dict, name: str, default: int) -> int:
    return int(data.get(name, default))


# ---------- API ----------
@app.get("/api/health")
def api_health():
    eng = _require_engine()
    return jsonify({"ok": True, "items": len(eng.items)})


@app.get("/api/filter")
def api_filter():
    eng = _require_engine()
    q = request.args.get("q", "", type=str)
    k = request.args.get("k", TOP_K, type=int)
    snap = eng.dispatch(QueryChanged(q))
    return jsonify(_payload(eng, snap, k))


@app.post("/api/move")
def api_move():
    eng = _require_engine()
    data = request.get_json(silent=True) or {}
    try:
        cmd = MoveSelection(str(data.get("direction", "")), _int_arg(data, "steps", 1))
        snap = eng.dispatch(cmd)
        k = _int_arg(data, "k", TOP_K)
    except (TypeError, ValueError) as e:
        return jsonify({"error": str(e)}), 400
    return jsonify(_payload(eng, snap, k))


@app.post("/api/viewport")
def api_viewport():
    eng = _require_engine()
    data = request.get_json(silent=True) or {}
    try:
        eng.dispatch(ReportViewport(_int_arg(data, "first", 0), _int_arg(data, "count", 0)))
    except (TypeError, ValueError):
        return jsonify({"error": "first and count must be integers"}), 400
    return jsonify({"ok": True})


@app.post("/api/select")
def api_select():
    """Confirm the clicked row ("index") or, without one, the selected row."""
    eng = _require_engine()
    data = request.get_json(silent=True) or {}
    if "index" in data:
        try:
            idx = int(data["index"])
        except (TypeError, ValueError):
            return jsonify({"error": "index must be an integer"}), 400
        if not 0 <= idx < len(eng.view):
            return jsonify({"error": f"index {idx} out of range"}), 404
        eng.dispatch(ItemClicked(idx))
    elif not len(eng.view):
        return jsonify({"error": "nothing to select"}), 404
    eng.dispatch(Confirm())
    log.info("Selected %r", eng.result)
    return jsonify({"raw": eng.result, "done": eng.done})


@app.post("/api/accept-query")
def api_accept_query():
    eng = _require_engine()
    eng.dispatch(ConfirmQuery())
    return jsonify({"raw": eng.result, "done": eng.done})


@app.post("/api/cancel")
def api_cancel():
    eng = _require_engine()
    eng.dispatch(Cancel())
    log.info("Selection cancelled")
    return jsonify({"raw": None, "done": eng.done})


# ---------- UI ----------
@app.get("/")
def home():
    # A tiny page: CSS variables + minimal JS, no external deps.
    # Selection and scrolling come from the server; the page only draws them.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Picker</title>
<style>
:root{
  --bg:#000; --panel:#0f0f0f; --ink:#dcdcdc; --muted:#969696;
  --accent:#ff0080; --mark:#ff64b4; --border:#1e1e1e;
}
*{box-sizing:border-box}
body{ margin:0; background:var(--bg); color:var(--ink);
  font:15px/1.4 ui-monospace, SFMono-Regular, Menlo, Consolas, monospace; }
.container{ max-width:900px; margin:20px auto; padding:0 16px; }
#count{ color:var(--muted); padding:4px 0; }
#q{ width:100%; padding:10px 12px; border:1px solid #c8c8c8; background:var(--panel);
  color:var(--ink); outline:none; font:inherit; }
#out{ position:relative; margin-top:8px; height:70vh; overflow-y:auto; }
.row{ height:24px; padding:2px 8px 2px 12px; border-left:4px solid transparent; cursor:pointer; white-space:pre; }
.row.sel{ border-left-color:var(--accent); color:#fff; }
.mark{ color:var(--mark); }
.row.sel .mark{ color:#ffb4dc; }
#picked{ margin-top:12px; color:var(--accent); }
</style>
</head>
<body>
<div class="container">
  <div id="count">0/0</div>
  <input id="q" type="text" placeholder="Search..." autocomplete="off" autofocus />
  <div id="out"></div>
  <div id="picked"></div>
</div>
<script>
const $ = (s) => document.querySelector(s);
const q = $("#q"), out = $("#out"), count = $("#count"), picked = $("#picked");
const K = 200, ROW = 24;
let state = {rows: [], selected: 0, highlight: true}, t, vt;

function esc(s){ return s.replace(/[&<>"]/g, c => ({"&":"&amp;","<":"&lt;",">":"&gt;",'"':"&quot;"}[c])); }
async function post(url, body){
  const resp = await fetch(url, {method: "POST", headers: {"Content-Type": "application/json"},
                                 body: JSON.stringify(body || {})});
  return resp.json();
}
function finish(data){
  q.disabled = true;
  picked.textContent = data.raw != null ? `selected: ${data.raw}` : "cancelled";
}
function render(data){
  state = data;
  count.textContent = `  ${data.matched}/${data.total}`;
  out.innerHTML = data.rows.map((r) => {
    const hits = new Set(r.positions);
    const txt = data.highlight
      ? Array.from(r.text).map((ch, j) => hits.has(j) ? `<span class="mark">${esc(ch)}</span>` : esc(ch)).join("")
      : esc(r.text);
    return `<div class="row${r.view_index === data.selected ? " sel" : ""}" data-i="${r.view_index}">${txt}</div>`;
  }).join("");
  if (data.scroll !== null) out.scrollTop = data.scroll * ROW;
  report();
  if (data.done) finish({raw: data.result});
}
function report(){
  clearTimeout(vt);
  vt = setTimeout(() => post("/api/viewport", {first: Math.floor(out.scrollTop / ROW),
                                               count: Math.floor(out.clientHeight / ROW)}), 30);
}
async function search(){
  const resp = await fetch(`/api/filter?q=${encodeURIComponent(q.value)}&k=${K}`);
  render(await resp.json());
}
async function move(direction){ render(await post("/api/move", {direction, k: K})); }
async function choose(body){
  const data = await post("/api/select", body);
  if (data.error) picked.textContent = data.error; else finish(data);
}
q.addEventListener("input", () => { clearTimeout(t); t = setTimeout(search, 60); });
out.addEventListener("scroll", report);
out.addEventListener("click", (ev) => {
  const row = ev.target.closest(".row"); if (row) choose({index: +row.dataset.i});
});
window.addEventListener("keydown", async (ev) => {
  if (q.disabled) return;
  if (ev.key === "ArrowDown" || (ev.ctrlKey && ev.key === "j")) { ev.preventDefault(); move("down"); }
  else if (ev.key === "ArrowUp" || (ev.ctrlKey && ev.key === "k")) { ev.preventDefault(); move("up"); }
  else if (ev.key === "Enter" && ev.shiftKey) { finish(await post("/api/accept-query")); }
  else if (ev.key === "Enter") { choose({}); }
  else if (ev.key === "Escape") { finish(await post("/api/cancel")); }
});
search();
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")


def serve(engine: Engine, *, host: str = "127.0.0.1", port: int = 8000, debug: bool = False) -> None:
    """
    Serve the picker until the page confirms or cancels. Requests are handled
    one at a time on this thread, so the engine never sees concurrent commands.
    Ctrl-C cancels.
    """
    global _engine
    _engine = engine
    app.debug = debug
    srv = make_server(host, port, app)
    log.info("Serving %d items on http://%s:%d", len(engine.items), host, port)
    try:
        while not engine.done:
            srv.handle_request()
    except KeyboardInterrupt:
        engine.dispatch(Cancel())
    finally:
        srv.server_close()
    log.info("Web picker finished (result=%r)", engine.result)
