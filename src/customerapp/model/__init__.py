"""
The MODEL layer contains the customer records and their persistence.
It has NO knowledge of the GUI (Qt).
"""
