"""IGNITION test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- contract/     : Behaviour every ComponentRegistry implementation must honour.
- integration/  : Wiring across layers through the composition root.
- e2e/          : The ``ignition`` command line driven through click's CliRunner.
- fixtures/     : Shared components and factories (no tests here).

General guidance
- Keep unit fast and deterministic; prefer fakes over mocks at boundaries.
- Contract parametrizes implementations to ensure consistent behaviour.
- Property-based tests live with the layer they exercise.
- Markers (unit, contract, integration, e2e) are applied by folder in conftest.py.
"""
