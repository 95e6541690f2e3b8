"""Prompt text for commit message generation."""

from typing import Dict, Sequence

# Conventional Commit types the model may choose from, in the order they
# are presented to it
COMMIT_TYPES: Dict[str, str] = {
    "feat": "A new feature",
    "fix": "A bug fix",
    "docs": "Documentation only changes",
    "style": "Changes that do not affect the meaning of the code (white-space, formatting, etc)",
    "refactor": "A code change that neither fixes a bug nor adds a feature",
    "perf": "A code change that improves performance",
    "test": "Adding missing tests or correcting existing tests",
    "build": "Changes that affect the build system or external dependencies",
    "ci": "Changes to our CI configuration files and scripts",
    "chore": "Other changes that don't modify src or test files",
}

COMMIT_TYPE_NAMES = list(COMMIT_TYPES)

MAX_SUBJECT_LENGTH = 72

_TYPE_LINES = "\n".join(
    f"   - `{name}`: {description}" for name, description in COMMIT_TYPES.items()
)

SYSTEM_PROMPT = f"""\
You are an expert AI assistant for a CLI tool that automates the git add, commit, and push workflow into a single command. Your sole purpose is to analyze git changes and generate concise, production-ready commit messages that follow the Conventional Commits specification.

**RULES:**
1. **Output ONLY the commit message.** Do not include any other text, pleasantries, or explanations.
2. Follow the Conventional Commits format: `type(scope): subject`.
3. The `type` must be one of the following:
{_TYPE_LINES}
4. The `scope` is optional and should describe the part of the codebase affected (e.g., `api`, `ui`, `auth`).
5. The `subject` must be in the present, imperative tense (e.g., "add feature" not "added feature"). It must start with a lowercase letter and should not end with a period.
6. Keep the subject under {MAX_SUBJECT_LENGTH} characters total.
7. If the change is significant, add a body explaining the "why" and "what." Separate the subject from the body with a single blank line.
8. If the change is a breaking change, add a `BREAKING CHANGE:` footer at the end.

**EXAMPLES:**

User input: "fixed the login button not working on safari"
Your output: `fix(ui): resolve safari login button compatibility issue`

User input: "added user authentication system with JWT tokens"
Your output: `feat(auth): implement JWT-based user authentication system`

User input: "updated documentation for API endpoints"
Your output: `docs(api): update endpoint documentation with examples`"""


def build_user_prompt(changed_paths: Sequence[str], staged_diff: str) -> str:
    """Build the user message sent alongside SYSTEM_PROMPT.

    Args:
        changed_paths: Changed files in detection order
        staged_diff: Full ``git diff --cached`` output

    Returns:
        Prompt embedding the file list and the diff
    """
    return f"""\
Generate a concise, professional git commit message for the following changes:

Changed files: {', '.join(changed_paths)}

Git diff:
{staged_diff}

Please provide a commit message that:
1. Starts with a conventional commit type ({', '.join(COMMIT_TYPE_NAMES)})
2. Is concise but descriptive
3. Uses imperative mood
4. Is under {MAX_SUBJECT_LENGTH} characters

Return only the commit message, nothing else."""
