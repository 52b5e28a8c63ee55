# lite_qsim/cli.py
import argparse, json, logging, sys
from pathlib import Path
from .config import BACKENDS, DEFAULT_BACKEND, DEFAULT_PROBABILITY_RULE, PROBABILITY_RULES
from .device import Device
from .errors import SimulatorError

def load_circuit(src: str):
    """Read a circuit file: either a list of op records or {"wires": n, "ops": [...]}."""
    text = sys.stdin.read() if src == "-" else Path(src).read_text()
    doc = json.loads(text)
    if isinstance(doc, dict):
        wires, ops = doc.get("wires"), doc.get("ops", [])
    else:
        wires, ops = None, doc
    if not isinstance(ops, list):
        raise ValueError(f"expected a list of gate records, got {type(ops).__name__}")
    return wires, ops

def format_probs(probs, wires):
    lines = []
    for i, p in enumerate(probs):
        # wire 0 is the rightmost bit
        lines.append(f"|{i:0{wires}b}>  {p:.6f}")
    return "\n".join(lines)

def main(argv=None):
    ap = argparse.ArgumentParser(prog="lite-qsim")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = ap.add_subparsers(dest="cmd", required=True)

    ap_run = sub.add_parser("run", help="Run a JSON circuit and print probabilities")
    ap_run.add_argument("src", help="Circuit JSON file, or - for stdin")
    ap_run.add_argument("--wires", type=int, help="Register size (overrides the file)")
    ap_run.add_argument("--backend", default=DEFAULT_BACKEND, choices=list(BACKENDS))
    ap_run.add_argument("--rule", default=DEFAULT_PROBABILITY_RULE, choices=list(PROBABILITY_RULES))
    ap_run.add_argument("--json", action="store_true", help="Print {\"probs\": [...]}")
    ap_run.add_argument("--plot", metavar="PNG", help="Also save a bar chart of the probabilities")

    args = ap.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    if args.cmd == "run":
        try:
            file_wires, ops = load_circuit(args.src)
        except (OSError, ValueError) as e:
            # json.JSONDecodeError is a ValueError
            print(f"[error] cannot read circuit {args.src}: {e}", file=sys.stderr)
            return 2
        wires = args.wires if args.wires is not None else file_wires
        if wires is None:
            ap.error("register size unknown: pass --wires or a {\"wires\": n} document")
        try:
            dev = Device(wires, backend=args.backend, probability_rule=args.rule)
            probs = dev.run(ops)
        except SimulatorError as e:
            print(f"[error] {e}", file=sys.stderr)
            return 2
        if args.json:
            print(json.dumps({"probs": probs.tolist()}))
        else:
            print(format_probs(probs, dev.wires))
        if args.plot:
            from .plot_results import plot_probabilities
            plot_probabilities(probs, args.plot, title=f"{len(ops)} op(s) on {dev.wires} wire(s)")
            print(f"[ok] wrote {args.plot}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
