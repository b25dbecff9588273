import json
import time

import requests
import typer

from dtpredict.config import settings
from dtpredict.core.outcomes import Mode
from dtpredict.core.validation import parse_bulk, parse_mode, parse_outcome
from dtpredict.log import setup_logging
from dtpredict.services import replay as replay_sequence


app = typer.Typer(help="Dragon Tiger predictor client")
BASE = settings.api_base


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v")):
    setup_logging("DEBUG" if verbose else "WARNING")


def _headers():
    h = {}
    if settings.api_key:
        h["X-API-Key"] = settings.api_key
    return h


def _post(path: str, body: dict | None = None) -> dict:
    r = requests.post(f"{BASE}{path}", json=body, headers=_headers(), timeout=10)
    r.raise_for_status()
    return r.json()


def _get(path: str) -> dict:
    r = requests.get(f"{BASE}{path}", headers=_headers(), timeout=10)
    r.raise_for_status()
    return r.json()


@app.command()
def add(outcome: str):
    lab = parse_outcome(outcome)
    if lab is None:
        raise typer.BadParameter("outcome must be dragon/tiger/tie (d/t/x)")
    typer.echo(_post("/outcome", {"outcome": lab.value}))


@app.command()
def bulk(text: str, replace: bool = typer.Option(False, "--replace")):
    typer.echo(_post("/bulk", {"text": text, "mode": "replace" if replace else "append"}))


@app.command()
def undo():
    typer.echo(_post("/undo"))


@app.command()
def clear():
    typer.echo(_post("/clear"))


@app.command()
def reset():
    typer.echo(_post("/reset"))


@app.command()
def mode(name: str):
    m = parse_mode(name)
    if m is None:
        raise typer.BadParameter("mode must be Normal, Advanced or Expert")
    typer.echo(_post("/mode", {"mode": m.value}))


@app.command("input-mode")
def input_mode(name: str = typer.Argument(..., help="automatic | manual")):
    typer.echo(_post("/input-mode", {"input_mode": name.strip().lower()}))


@app.command()
def predict(wait: bool = typer.Option(False, "--wait", help="poll until the prediction is ready")):
    out = _post("/predict")
    if wait and out["accepted"]:
        st = out["state"]
        while st["busy"]:
            time.sleep(0.2)
            st = _get("/state")
        out["state"] = st
    typer.echo(out)


@app.command()
def feedback(correct: bool = typer.Option(..., "--correct/--incorrect")):
    typer.echo(_post("/feedback", {"correct": correct}))


@app.command()
def state():
    typer.echo(_get("/state"))


@app.command()
def export(out: str = typer.Option(None, "--out", help="file to write; defaults to EXPORT_FILENAME")):
    data = _get("/export")
    path = out or settings.export_filename
    with open(path, "w", encoding="utf-8") as fh:
        json.dump(data, fh, indent=2)
    typer.echo(f"wrote {path}")


@app.command()
def replay(text: str, mode: str = typer.Option("Normal", "--mode", "-m"), as_json: bool = typer.Option(False, "--json")):
    """Score a recorded sequence offline, without a server."""
    m = parse_mode(mode)
    if m is None:
        raise typer.BadParameter("mode must be Normal, Advanced or Expert")
    seq = parse_bulk(text)
    if not seq:
        raise typer.BadParameter("no outcomes recognised")
    result = replay_sequence(seq, mode=m)
    if as_json:
        typer.echo(json.dumps(result, indent=2))
        return
    for row in result["rows"]:
        mark = {True: "ok", False: "miss", None: "-"}[row["correct"]]
        typer.echo(f"#{row['index']:>3} {row['prediction']:<40} actual={row['actual'] or '-':<6} {mark}")
    perf = result["stats"]["tool_performance"]
    typer.echo(f"{Mode(m).value}: {perf['correct_predictions']}/{perf['total_predictions']} ({perf['accuracy']}%)")


if __name__ == "__main__":
    app()
