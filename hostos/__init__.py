"""
# Host operating system facilities for embedded script engines.

# Each subpackage is a small project exposing one family of host services:

# /&.time/
	# Calendar records, time construction, textual time formatting, and elapsed time.
# /&.context/
	# Function tools shared by the projects.
# /&.test/
	# Test harness used by the projects' test modules.
"""
