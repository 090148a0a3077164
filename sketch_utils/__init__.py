"""Collaborators around the sketch core: upload, export, submission, UI glue."""
