#!/usr/bin/env python3
"""
Socrates example.

Proves "Mortal(Socrates)" from "all men are mortal" and "Socrates is a man",
printing every resolution step as it is found, then the refutation itself.
"""

from resolvent import ResolutionEngine, CallbackTraceSink, StepRecord


def print_record(record):
    if isinstance(record, StepRecord):
        print(f"  step {record.step_number}: [{record.left_clause_id}] {record.left_clause_text}"
              f"  +  [{record.right_clause_id}] {record.right_clause_text}"
              f"  ⊢  {record.resolvent_text}")
    else:
        print(f"  {record.kind} after {record.step_number} steps ({record.clause_count} clauses)")


def main():
    engine = ResolutionEngine.from_sentences(
        ["∀x (Man(x) ⇒ Mortal(x))", "Man(Socrates)"],
        trace=CallbackTraceSink(print_record),
    )

    print("Clauses:")
    for clause in engine.clauses:
        print(f"  {clause.id}: {clause}")
    print()

    for query in ["Mortal(Socrates)", "Mortal(Zeus)"]:
        print(f"Query: {query}")
        proof = engine.prove(query)
        print(f"Outcome: {proof.outcome.value}")
        if proof.is_complete:
            print("Refutation:")
            for step in proof.refutation():
                print(f"  {step.left} , {step.right}  ⊢  {step.resolvent}")
        print()


if __name__ == "__main__":
    main()
