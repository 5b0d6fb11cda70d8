from __future__ import annotations
import argparse
from flask import Flask, request, jsonify, Response
from fuzzysearch.config import DEFAULT_RELEVANCE, TOP_K
from fuzzysearch.engine import Engine
from fuzzysearch.errors import InvalidInput
from fuzzysearch.records import as_plain

app = Flask(__name__)
_engine: Engine | None = None


def _int_arg(name: str, default: int | None) -> int | None:
    raw = request.args.get(name, "", type=str).strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise InvalidInput(f"{name} must be an integer, got {raw!r}") from None


@app.errorhandler(InvalidInput)
def _bad_input(e: InvalidInput):
    return jsonify({"error": str(e)}), 400


# ---------- API ----------
@app.get("/api/search")
def api_search():
    if _engine is None:
        return jsonify({"error": "engine not initialized"}), 503
    q = request.args.get("q", "", type=str)
    if not q.strip():
        return jsonify([])
    hits = _engine.find(
        q,
        relevance=_int_arg("relevance", DEFAULT_RELEVANCE),
        limit=_int_arg("limit", TOP_K),
        offset=_int_arg("offset", 0),
        collections=request.args.getlist("collection") or None,
    )
    rows = []
    for h in hits:
        row = h.as_dict()
        row["record"] = as_plain(h.record)
        rows.append(row)
    return jsonify(rows)


@app.get("/health")
def health():
    if _engine is None:
        return jsonify({"ok": False}), 503
    return jsonify({"ok": True, "collections": len(_engine.collections()), "records": _engine.count()})


# ---------- UI ----------
@app.get("/")
def home():
    # One page, no external JS/CSS deps
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Fuzzy Search</title>
<style>
body{margin:0;background:#0b0f14;color:#cfd8e3;font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Arial}
.container{max-width:980px;margin:24px auto;padding:0 16px}
.card{background:#0f141b;border:1px solid #1c2530;border-radius:16px;padding:18px}
h1{font-size:20px;margin:0 0 8px 0}
input{background:#0b1117;color:#cfd8e3;border:1px solid #1c2530;border-radius:10px;padding:10px 12px}
#q{width:60%}
.row{display:grid;grid-template-columns:3rem 5rem 9rem 1fr;gap:10px;padding:10px 14px;border-top:1px solid #1c2530}
.head{color:#8a94a6;font-weight:600}
.mono{font-family:ui-monospace,Menlo,Consolas,monospace;font-size:13px}
.err{color:#ffb0b0;margin-top:12px}
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>Fuzzy Search</h1>
      <input id="q" type="text" placeholder="Type to search…" autocomplete="off" autofocus />
      Relevance <input id="rel" type="number" min="1" max="100" value="75" class="mono" />
      <div id="err" class="err"></div>
      <div class="row head"><div>#</div><div>Score</div><div>Collection</div><div>Record</div></div>
      <div id="out"></div>
    </div>
  </div>
<script>
const q = document.querySelector("#q"), rel = document.querySelector("#rel");
const out = document.querySelector("#out"), err = document.querySelector("#err");
let t;
function esc(s){return String(s).replace(/[&<>"]/g,c=>({"&":"&amp;","<":"&lt;",">":"&gt;",'"':"&quot;"}[c]))}
async function search(){
  err.textContent = "";
  if(!q.value.trim()){ out.innerHTML = ""; return; }
  const resp = await fetch(`/api/search?q=${encodeURIComponent(q.value)}&relevance=${rel.value}`);
  const data = await resp.json();
  if(!resp.ok){ err.textContent = data.error || `HTTP ${resp.status}`; return; }
  out.innerHTML = data.length ? data.map((r,i)=>`
    <div class="row"><div>${i+1}</div><div class="mono">${r.score}</div>
    <div>${esc(r.collection)}</div><div class="mono">${esc(JSON.stringify(r.record))}</div></div>`).join("")
    : `<div class="row"><div></div><div></div><div></div><div>No matches.</div></div>`;
}
function debounced(){ clearTimeout(t); t = setTimeout(search, 150); }
q.addEventListener("input", debounced);
rel.addEventListener("change", debounced);
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of Engine")
    ap.add_argument("--data", nargs="+", required=True, help="Record files or folders")
    ap.add_argument("--fields", nargs="+", required=True)
    ap.add_argument("--skip", nargs="+", default=[])
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    global _engine
    _engine = Engine(skip=args.skip, verbose=args.verbose)
    _engine.load(args.data, args.fields)

    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        _engine.shutdown()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
