from fastapi import FastAPI, Response
from pydantic import BaseModel
from models import Token, ScanError, ApiOk, ApiErr
from lexer import tokenize, render, format_token, format_error
from log import get_logger
import httpx, os, sys, uuid, argparse

# environment variables
LEX = os.getenv("LEX_URL", "http://lexer-svc:8000/lex")
SOURCE_PATH = os.getenv("SOURCE_PATH", "input/source.pas")
OUTPUT_DIR = os.getenv("OUTPUT_DIR", "output")

app = FastAPI(title="gateway")
log = get_logger("gateway")

def read_source(path):
    with open(path, "r", encoding="utf-8") as f:
        return f.read().strip()

def run(source_path=SOURCE_PATH, output_dir=OUTPUT_DIR):
    """Scan a source file into <output_dir>/source.dyd and source.err."""
    chars = read_source(source_path)
    os.makedirs(output_dir, exist_ok=True)
    dyd = os.path.join(output_dir, "source.dyd")
    err = os.path.join(output_dir, "source.err")
    with open(dyd, "w", encoding="utf-8") as tf, open(err, "w", encoding="utf-8") as ef:
        ok = tokenize(chars,
                      lambda t: tf.write(format_token(t)),
                      lambda e: ef.write(format_error(e)))
    log.info("%s -> %s (%s)", source_path, dyd, "ok" if ok else "errors in " + err)
    return ok

def _client():
    return httpx.AsyncClient(timeout=10)

@app.get("/healthz")
def healthz():
    return {"ok": True}

class ScanReq(BaseModel):
    source: str

async def _forward(source):
    rid = str(uuid.uuid4())
    hdr = {"X-Request-Id": rid}
    try:
        async with _client() as c:
            r = await c.post(LEX, json={"source": source}, headers=hdr)
            r.raise_for_status()
            lex = r.json()
    except httpx.HTTPError as e:
        log.warning("lexer-svc unreachable (request %s): %s", rid, e)
        return ApiErr(phase="gateway", code="E_FORWARD_LEX", msg=f"Failed to contact lexer: {e}")
    if not lex.get("ok"):
        return ApiErr(**lex)
    data = lex["data"]
    dyd, err = render((Token(**t) for t in data["tokens"]), (ScanError(**e) for e in data["errors"]))
    return ApiOk(data={"dyd": dyd, "err": err, "success": data["success"]})

@app.post("/scan")
async def scan(req: ScanReq):
    return await _forward(req.source)

@app.post("/download")
async def download(req: ScanReq):
    result = await _forward(req.source)
    if not result.ok:
        return result
    headers = {"Content-Disposition": "attachment; filename=source.dyd"}
    return Response(content=result.data["dyd"].encode(), media_type="application/octet-stream", headers=headers)

def main(argv=None):
    ap = argparse.ArgumentParser(description="Scan a source program into token (.dyd) and error (.err) streams")
    ap.add_argument("--source", default=SOURCE_PATH)
    ap.add_argument("--out", default=OUTPUT_DIR)
    args = ap.parse_args(argv)
    return 0 if run(args.source, args.out) else 1

if __name__ == "__main__":
    sys.exit(main())
