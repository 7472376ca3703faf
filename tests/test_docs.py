"""The repository's own tutorials must pass the integrity check."""
from pathlib import Path

from src.application.services.documentation_integrity_service import DocumentationIntegrityService
from src.infrastructure.config.config_loader import ConfigLoader
from src.infrastructure.repositories.file_document_repository import FileDocumentRepository

PROJECT_ROOT = Path(__file__).resolve().parent.parent


def _configured_service():
    docs_config = ConfigLoader(PROJECT_ROOT / "config.yaml", environ={}).load_docs_config()
    return DocumentationIntegrityService(
        FileDocumentRepository(PROJECT_ROOT / docs_config.root, ignore=docs_config.ignore),
        first_article=docs_config.first_article,
        reading_order=docs_config.reading_order,
        require_complete_chain=docs_config.require_complete_chain,
    )


def test_tutorials_have_no_issues():
    report = _configured_service().check()

    assert [issue.format() for issue in report.issues] == []
    assert report.documents_checked == 6


def test_every_tutorial_has_python_examples():
    from src.infrastructure.markdown import parse_markdown

    repo = FileDocumentRepository(PROJECT_ROOT / "docs")
    for path in repo.list_documents():
        if path.name == "README.md":
            continue
        article = parse_markdown(repo.read_document(path), path)
        assert any(block.language == "python" for block in article.code_blocks), path.name
