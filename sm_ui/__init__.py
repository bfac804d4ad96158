"""Host collaborators, presenters and CLI for searchable-multiselect."""
