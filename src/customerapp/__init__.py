"""
CustomerApp
===========
Presentation state for browsing and editing a customer list.

Packages:
    model: Customer records and the repositories that persist them.
    viewmodel: The observable state and commands a UI binds to.
"""
