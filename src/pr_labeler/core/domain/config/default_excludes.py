# Paths that never count toward per-file metrics: lockfiles, vendored
# dependencies, build output, generated code, caches and editor files.
DEFAULT_EXCLUDE_PATTERNS: list[str] = [
    # lockfiles
    "package-lock.json",
    "yarn.lock",
    "pnpm-lock.yaml",
    "Gemfile.lock",
    "Cargo.lock",
    "composer.lock",
    "poetry.lock",
    "Pipfile.lock",
    "uv.lock",
    "pdm.lock",
    "*.lock",
    # dependencies
    "**/node_modules/**",
    "**/vendor/**",
    "**/.venv/**",
    "**/venv/**",
    "**/site-packages/**",
    # build output
    "**/dist/**",
    "**/build/**",
    "**/out/**",
    "**/target/**",
    "*.egg-info/**",
    # minified and bundled assets
    "*.min.js",
    "*.min.css",
    "*.bundle.js",
    "*.map",
    # reports
    "coverage/**",
    "htmlcov/**",
    ".coverage",
    "reports/**",
    "test-results/**",
    # logs
    "*.log",
    "logs/**",
    # editors and OS files
    ".vscode/**",
    ".idea/**",
    "*.swp",
    ".DS_Store",
    "Thumbs.db",
    # git
    ".git/**",
    ".gitignore",
    ".gitattributes",
    # generated code
    "*.generated.*",
    "*_pb2.py",
    "*_pb2_grpc.py",
    "*.pb.go",
    # caches
    "**/__pycache__/**",
    ".cache/**",
    ".mypy_cache/**",
    ".pytest_cache/**",
    ".ruff_cache/**",
    ".tox/**",
    # temporary files
    "*.tmp",
    "tmp/**",
    # environment files
    ".env",
    ".env.*",
    # databases and binaries
    "*.sqlite",
    "*.sqlite3",
    "*.db",
    "*.pyc",
    "*.pyo",
    "*.so",
    "*.dll",
    "*.dylib",
    "*.exe",
    "*.wasm",
]
