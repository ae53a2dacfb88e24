import streamlit as st

__all__ = ["display_home_page"]


def display_home_page():
    st.title("SQL to POCO")
    st.markdown(
        """
        Paste SQL Server `CREATE TABLE` scripts and get matching data objects back.

        **Target languages:**

        *   **C#:** classes with auto-properties, nullable value types as `int?`.
        *   **Java:** beans with getters and setters, nullable primitives boxed.
        *   **TypeScript:** interfaces, nullable columns marked `name?:`.
        *   **Python:** dataclasses, nullable columns typed `Optional[...]`.

        A column is non-nullable only when its definition says `NOT NULL`.
        """
    )
