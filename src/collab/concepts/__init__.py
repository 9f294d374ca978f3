"""Concept system — [[cf:name]] references resolved into shared context.

Layout:
    concepts/
    ├── ooda.md                        # One concept per file, name = filename stem
    ├── alignment.md                   # May reference other concepts: [[cf:ooda]]
    └── review.md                      # Optional YAML frontmatter (summary: ...)

Per turn: scanner → resolver (store) → session accumulator → injector.
"""
