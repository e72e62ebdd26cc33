REPOSITORY_TOOLS_INSTRUCTIONS = """
## Repository File Tools

You have access to tools for exploring and reading files from a document repository.

### Available Tools

1. **repository_ls** - List all files with line and character counts
   - Use first to discover what files are available

2. **repository_glob** - Find files by pattern
   - Use glob patterns: *.ts, **/*.md, src/**/*.{js,ts}

3. **repository_grep** - Search file contents with regex
   - Supports context lines and a filePattern filter
   - "file:line:text" marks a match, "line-text" a context line

4. **repository_read** - Read file content with line numbers
   - Read whole files or ranges with startLine/endLine

5. **repository_search** - Semantic search
   - Natural language search for concepts and features
   - Returns chunks ranked by similarity

### Recommended Workflow

1. Start with `repository_ls` to see available files
2. Use `repository_glob` to narrow down by file type
3. Use `repository_grep` to find specific patterns
4. Use `repository_read` to examine relevant files
5. Use `repository_search` for concept-based exploration

### Tips

- For exact matches: use repository_grep
- For concept/meaning: use repository_search
- Read large files in chunks (startLine/endLine)
- Errors come back as {"error": "..."}; adjust the arguments and retry
"""


def get_repository_tools_instructions() -> str:
    """Instructions block for a system prompt that exposes the repository tools."""
    return REPOSITORY_TOOLS_INSTRUCTIONS.strip()
