import streamlit as st

from utils import (
    poco_convert_api,
    list_languages_api,
    SUPPORTED_SOURCE_DIALECTS,
    CODE_HIGHLIGHT,
    FILE_EXTENSIONS,
)

__all__ = ["display_poco_conversion_page"]

SAMPLE_DDL = """CREATE TABLE dbo.Customers (
    Id INT IDENTITY(1,1) NOT NULL PRIMARY KEY,
    Name NVARCHAR(100) NOT NULL,
    Email NVARCHAR(255),
    Balance DECIMAL(18, 2),
    CreatedAt DATETIME2 NOT NULL
);"""


def display_poco_conversion_page():
    st.header("Generate Data Objects")

    languages = list_languages_api()
    col1, col2 = st.columns(2)
    with col1:
        language = st.selectbox("Target Language", languages, key="poco_language")
    with col2:
        dialect = st.selectbox("Source Dialect", SUPPORTED_SOURCE_DIALECTS, key="poco_dialect")

    sql_script = st.text_area("CREATE TABLE script", value=SAMPLE_DDL, height=260, key="poco_sql_script")

    if st.button("Generate", type="primary", key="poco_generate_button"):
        if not sql_script.strip():
            st.warning("Enter at least one CREATE TABLE statement.")
            return
        with st.spinner("Generating..."):
            result = poco_convert_api(sql_script, language, dialect)
        st.session_state.poco_last_result = (language, result)

    if "poco_last_result" not in st.session_state:
        return

    language, result = st.session_state.poco_last_result
    if not result.get("success"):
        st.error(result.get("error") or "Conversion failed.")
        return

    generated = result.get("generatedCode", {})
    st.success(f"Generated {len(generated)} data object(s).")
    extension = FILE_EXTENSIONS.get(language, "txt")
    for table_name, code in generated.items():
        st.subheader(table_name)
        st.code(code, language=CODE_HIGHLIGHT.get(language))
        st.download_button(
            f"Download {table_name}.{extension}",
            data=code,
            file_name=f"{table_name}.{extension}",
            key=f"download_{table_name}",
        )
