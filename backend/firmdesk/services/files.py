from fastapi import HTTPException, UploadFile

from firmdesk.core.config import settings

def read_csv_upload(file: UploadFile, max_bytes: int | None = None) -> str:
    if not file.filename or not file.filename.lower().endswith(".csv"):
        raise HTTPException(status_code=400, detail="Only .csv supported")

    limit = max_bytes if max_bytes is not None else settings.MAX_UPLOAD_BYTES
    raw = file.file.read(limit + 1)
    if len(raw) > limit:
        raise HTTPException(status_code=413, detail=f"File larger than {limit} bytes")
    try:
        # utf-8-sig drops a leading BOM written by spreadsheet tools
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail="File is not valid UTF-8")
