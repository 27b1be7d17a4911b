"""Open a repository's GitLab homepage or the merge request for the current branch."""
