"""
The VIEWMODEL layer holds presentation state: observable collections,
selection and commands. It uses Qt's core module only, never widgets.
"""
