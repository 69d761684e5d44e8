#!/usr/bin/env python3
"""
Prove queries against a knowledge base.

USAGE:
    resolvent socrates.kb
    resolvent socrates.kb --query "Mortal(Socrates)" --show-trace
    resolvent socrates.kb --max-steps 500 --loop exhaustive
    resolvent socrates.kb --json proofs.json --trace-file trace.json
"""

import argparse
import json
import logging
import sys
import time
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from resolvent.core.exceptions import MalformedSentence
from resolvent.engine import ResolutionEngine
from resolvent.fileformats import KnowledgeBase, get_format_handler
from resolvent.loops import list_loops
from resolvent.proofs import Proof, JSONTraceSink, ProofJSONEncoder
from resolvent.utils.config import Config, get_config


def load_knowledge_base(path: Path) -> KnowledgeBase:
    try:
        handler = get_format_handler(file_path=path)
    except ValueError:
        handler = get_format_handler("sentences")
    return handler.parse_file(path)


def format_result(proof: Proof, elapsed: float) -> str:
    if proof.is_complete:
        mark, label = "✓", "PROVED"
    elif proof.is_saturated:
        mark, label = "✗", "NOT ENTAILED"
    else:
        mark, label = "?", "INCONCLUSIVE"
    return f"{mark} {label}: {proof.query}  ({proof.length} steps, {len(proof.state)} clauses, {elapsed:.3f}s)"


def format_refutation(proof: Proof) -> List[str]:
    lines = []
    for step in proof.refutation():
        lines.append(
            f"  {step.step_number:>4}. [{step.left.id}] {step.left}  +  "
            f"[{step.right.id}] {step.right}  ⊢  [{step.resolvent.id}] {step.resolvent}"
        )
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Prove queries by resolution refutation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("problem", type=Path, help="Knowledge base file (one sentence per line)")
    parser.add_argument("--query", action="append", dest="queries",
                        help="Query to prove (repeatable, overrides the file's ? lines)")
    parser.add_argument("--loop", choices=list_loops(), help="Saturation loop (default from config)")
    parser.add_argument("--max-steps", type=int, help="Derived-clause limit per query")
    parser.add_argument("--config", type=Path, help="YAML configuration file")
    parser.add_argument("--trace-file", type=Path, help="Write the step records to a JSON file")
    parser.add_argument("--json", dest="json_output", type=Path, help="Export proofs to a JSON file")
    parser.add_argument("--show-trace", action="store_true", help="Print the refutation of proved queries")
    parser.add_argument("--verbose", action="store_true", help="Show debug logging")

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if not args.problem.exists():
        print(f"Error: File not found: {args.problem}", file=sys.stderr)
        return 1

    try:
        config = Config(str(args.config)) if args.config else get_config()
    except (OSError, ValueError) as e:
        print(f"Error reading configuration: {e}", file=sys.stderr)
        return 1

    loop = args.loop or config.get("prover.loop", "basic")
    max_steps = args.max_steps if args.max_steps is not None else config.get("prover.max_steps")
    trace_path = args.trace_file or config.get("trace.path")

    knowledge_base = load_knowledge_base(args.problem)
    queries = args.queries or knowledge_base.queries
    if not queries:
        parser.error("no queries: add '? query' lines to the file or pass --query")

    trace = JSONTraceSink(trace_path, name=args.problem.stem) if trace_path else None
    try:
        engine = ResolutionEngine.from_sentences(
            knowledge_base.sentences, loop=loop, max_steps=max_steps, trace=trace
        )
    except MalformedSentence as e:
        print(f"Parse error: {e}", file=sys.stderr)
        return 2
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Loaded {len(engine.clauses)} clauses from '{args.problem}'")

    exit_code = 0
    proofs = []
    try:
        for query in tqdm(queries, desc="Queries", disable=len(queries) < 2, leave=False):
            start = time.time()
            try:
                proof = engine.prove(query)
            except MalformedSentence as e:
                tqdm.write(f"Parse error: {e}", file=sys.stderr)
                exit_code = 2
                continue
            tqdm.write(format_result(proof, time.time() - start))
            if args.show_trace and proof.is_complete:
                for line in format_refutation(proof):
                    tqdm.write(line)
            proofs.append(proof)
    finally:
        if trace is not None:
            trace.close()

    if args.json_output:
        with open(args.json_output, "w", encoding="utf-8") as f:
            json.dump(proofs, f, cls=ProofJSONEncoder, indent=2, ensure_ascii=False)
        print(f"Proofs written to {args.json_output}")

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
