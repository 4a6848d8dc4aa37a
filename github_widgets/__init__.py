"""
GitHub Widgets

Animated SVG widgets for GitHub profiles: an experience timeline laid out
by a deterministic temporal layout engine, and a contributions chart.
Each layer communicates only through the frozen contracts.

LAYER STRUCTURE:
================

1. CONTRACTS (contracts/)
   - Immutable data model and error taxonomy
   - MUST NOT: Contain behaviour beyond pure helpers

2. TEMPORAL (temporal/)
   - Injectable clock, partial-date parsing, UTC day bounds
   - MUST NOT: Read system time outside LogicalClock

3. LAYOUT (layout/)
   - Parser, time scale, lane allocator, label placement, animation
     scheduler, tick generator, activity geometry
   - MUST NOT: Do I/O, read the clock, emit markup

4. INGESTION (ingestion/)
   - CSV contract, logo resolution, GitHub GraphQL fetch
   - MUST NOT: Compute geometry

5. RENDER (render/)
   - SVG serialization of computed layouts and error cards
   - MUST NOT: Recompute positions or timings

6. STORAGE (storage/)
   - Bounded LRU response cache with TTL
   - MUST NOT: Cache failures

7. API (api/)
   - FastAPI app mapping requests to the WidgetService (engine.py)

CONSTRAINTS ENFORCED:
=====================
- Deterministic: same records + options + now = identical layout
- Fail fast: one bad record fails the whole request, nothing partial
- Logo failures degrade to "no logo", never to an error
"""

__version__ = "0.1.0"
