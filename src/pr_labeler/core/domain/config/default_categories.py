from pr_labeler.core.domain.config.category_config import CategoryConfig

DEFAULT_CATEGORIES: list[CategoryConfig] = [
    CategoryConfig(
        label="category/tests",
        patterns=[
            "__tests__/**",
            "tests/**",
            "**/test_*.py",
            "**/*_test.py",
            "**/conftest.py",
            "**/*.test.ts",
            "**/*.test.tsx",
        ],
    ),
    CategoryConfig(
        label="category/ci-cd",
        patterns=[
            ".github/workflows/**",
            ".gitlab-ci.yml",
            ".circleci/**",
            "Jenkinsfile",
            ".travis.yml",
            "azure-pipelines.yml",
            ".buildkite/**",
        ],
    ),
    CategoryConfig(
        label="category/documentation",
        patterns=["docs/**", "**/*.md", "**/*.rst"],
        exclude=[".kiro/**", ".specify/**", "spec/**", "specs/**"],
    ),
    CategoryConfig(
        label="category/config",
        patterns=[
            "**/setup.cfg",
            "**/tox.ini",
            "**/.flake8",
            "**/mypy.ini",
            "**/pytest.ini",
            "**/ruff.toml",
            "**/.ruff.toml",
            "**/.pre-commit-config.yaml",
            "**/.editorconfig",
            "**/*.config.{js,ts,mjs,cjs}",
            "**/tsconfig.json",
            "**/tsconfig.*.json",
            "**/.eslintrc*",
            "**/.prettierrc*",
            "**/mise.toml",
            "**/action.yml",
            "**/action.yaml",
            "**/configs/**/*.{py,json,toml,yaml,yml}",
        ],
    ),
    CategoryConfig(
        label="category/spec",
        patterns=[".kiro/**", ".specify/**", "spec/**", "specs/**"],
    ),
    CategoryConfig(
        label="category/dependencies",
        patterns=[
            "**/requirements*.txt",
            "**/pyproject.toml",
            "**/poetry.lock",
            "**/uv.lock",
            "**/Pipfile",
            "**/Pipfile.lock",
            "**/package.json",
            "**/package-lock.json",
            "**/yarn.lock",
            "**/pnpm-lock.yaml",
            "**/go.mod",
            "**/go.sum",
            "**/Cargo.toml",
            "**/Cargo.lock",
            "**/Gemfile",
            "**/Gemfile.lock",
        ],
    ),
    CategoryConfig(
        label="category/feature",
        patterns=["src/features/**", "features/**", "src/components/**"],
        exclude=["**/*.test.*", "**/*.spec.*", "**/__tests__/**", "**/test_*.py"],
    ),
    CategoryConfig(
        label="category/infrastructure",
        patterns=[
            "Dockerfile*",
            "docker-compose*",
            "terraform/**",
            ".mise.toml",
            "mise.toml",
            ".tool-versions",
            "k8s/**",
            "kubernetes/**",
            "helm/**",
            "ansible/**",
        ],
    ),
    CategoryConfig(
        label="category/security",
        patterns=[
            "**/auth*/**",
            "**/*auth*.py",
            "**/*auth*.ts",
            "**/*jwt*.py",
            "**/*session*.py",
            "**/*security*",
            ".env*",
            "secrets/**",
        ],
    ),
]
