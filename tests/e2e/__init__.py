"""
End-to-end tests for arqforge.

These drive the command-line entry point against real project directories
and check the resulting pom.xml and arquillian.xml files.
"""
