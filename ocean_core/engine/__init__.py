"""Trait analytics engine.

Sub-modules:
- statistics      – mean / variance / percentile helpers
- diversity       – mean traits & per-trait diversity
- composite       – cohesion, innovation, conflict ... composite scores
- culture         – culture type classification
- risks           – risk factor rules
- health          – organizational health indicators
- organization    – organizational profile builder
- team            – team composition, role fit & next-hire targets
- executive_fit   – executive ↔ organization fit, succession planning
- leadership      – leadership styles & stress response
- recommendations – improvement actions
- insights        – narrative insights
"""
