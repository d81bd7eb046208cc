"""
Commands - CLI command implementations for basekit.

Each module corresponds to a top-level CLI command:
- fees:        Tiered gas fee recommendations
- eligibility: Builder rewards eligibility and activity score
- status:      Network status and account balance
"""
