import streamlit as st


def render(settings=None):
    st.markdown("### 🔐 Safe Password Generator")

    st.markdown(
        "Passwords are generated with the operating system's secure random source, "
        "shown only in this browser session, and never stored or sent anywhere."
    )
    st.markdown(
        "- At least one character from every selected set is guaranteed.\n"
        "- Look-alike characters (`i l 1 L o 0 O`) can be left out.\n"
        "- The strength meter is a quick heuristic based on length and character variety."
    )

    st.info("Pick **Generator** in the sidebar to start.")
