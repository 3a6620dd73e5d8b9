"""
src package - bytediff application modules

This package contains the application organized into:
- domain: Payloads, reports and diff cases
- application: Comparison engine and case coordinator
- infrastructure: Case stores, configuration and logging
- interface: HTTP API and command line
"""
