"""Document loading service for text and PDF sources."""
import logging
import os
import pymupdf

from models.document import Document, Page
from services.errors import DocumentLoadError

logger = logging.getLogger(__name__)

class DocumentLoader:
    """Loads plain text and PDF files into Document models."""
    
    SUPPORTED_EXTENSIONS = (".txt", ".pdf")
    
    def __init__(self, encoding: str = "utf-8"):
        """
        Initialize DocumentLoader.
        
        Args:
            encoding: Encoding of plain text files; undecodable bytes are replaced
        """
        self.encoding = encoding
    
    def load_document(self, filepath: str) -> Document:
        """
        Load a single document.
        
        ``.txt`` files are read as plain text, ``.pdf`` files page by page.
        
        Args:
            filepath: Path to the source file
            
        Returns:
            Document with its pages (a text file is a single page)
            
        Raises:
            DocumentLoadError: If the file is missing, unsupported or cannot be read
        """
        if not os.path.isfile(filepath):
            logger.error(f"Document not found: {filepath}")
            raise DocumentLoadError(f"Document not found: {filepath}", path=filepath)
        
        filename = os.path.basename(filepath)
        extension = os.path.splitext(filename)[1].lower()
        if extension not in self.SUPPORTED_EXTENSIONS:
            logger.error(f"Unsupported document type: {filename}")
            raise DocumentLoadError(
                f"Unsupported document type '{extension}' for {filename}",
                path=filepath,
                supported=list(self.SUPPORTED_EXTENSIONS)
            )
        
        if extension == ".pdf":
            document = self._load_pdf(filepath, filename)
        else:
            document = self._load_text(filepath, filename)
        
        logger.info(f"Loaded {filename}: {document.total_pages} pages")
        return document
    
    def _load_text(self, filepath: str, filename: str) -> Document:
        try:
            with open(filepath, "r", encoding=self.encoding, errors="replace") as file:
                text = file.read()
        except OSError as e:
            logger.error(f"Failed to read {filename}: {e}")
            raise DocumentLoadError(f"Failed to read {filename}: {e}", path=filepath) from e
        
        return Document(
            filename=filename,
            pages=[Page(page_number=1, text=text, word_count=len(text.split()))],
            total_pages=1
        )
    
    def _load_pdf(self, filepath: str, filename: str) -> Document:
        """
        Load a PDF file and extract text page-by-page.
        
        Args:
            filepath: Full path to PDF file
            filename: Name of the file
            
        Returns:
            Document object with extracted text
        """
        try:
            pdf_document = pymupdf.open(filepath)
        except Exception as e:
            logger.error(f"Failed to load PDF {filename}: {str(e)}")
            raise DocumentLoadError(f"Failed to load PDF {filename}: {e}", path=filepath) from e
        
        try:
            pages = []
            for page_num in range(len(pdf_document)):
                text = pdf_document[page_num].get_text()
                pages.append(Page(
                    page_number=page_num + 1,  # 1-indexed
                    text=text,
                    word_count=len(text.split())
                ))
        finally:
            pdf_document.close()
        
        return Document(
            filename=filename,
            pages=pages,
            total_pages=len(pages)
        )
