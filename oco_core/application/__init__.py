"""
Application Layer - Use Cases and Ports

This layer contains:
- The job builder (draft + instrument -> OcoJob)
- Use case implementations (build, validate, submit)
- The editing session
- Port definitions (interfaces for external dependencies)

NO framework dependencies allowed (pure Python).
"""
