import streamlit as st

from frontend.api_client import ApiClient, ApiError


def client():
    return ApiClient(token=st.session_state.get("token"))


def register():
    st.title("Register")
    username = st.text_input("Username")
    email = st.text_input("Email")
    password = st.text_input("Password", type="password")
    if st.button("Register"):
        try:
            client().register(username, email, password)
        except ApiError as e:
            st.error(e.message)
        else:
            st.success("Registration successful. You can log in now.")


def login():
    st.title("Login")
    email = st.text_input("Email")
    password = st.text_input("Password", type="password")
    if st.button("Log in"):
        try:
            data = client().login(email, password)
        except ApiError as e:
            st.error(e.message)
            return
        # Store the token in session state
        st.session_state["token"] = data["token"]
        st.session_state["username"] = data["username"]
        st.rerun()


def logout():
    st.session_state.pop("token", None)
    st.session_state.pop("username", None)
    st.rerun()


def add_question():
    st.title("Add a question")
    with st.form("add_question", clear_on_submit=True):
        title = st.text_input("Title")
        topic = st.text_input("Topic")
        problem_statement = st.text_area("Problem statement")
        solution = st.text_area("Solution")
        submitted = st.form_submit_button("Add question")
    if submitted:
        try:
            client().create_question(title, problem_statement, solution, topic)
        except ApiError as e:
            st.error(e.message)
        else:
            st.success("Question added.")


def edit_question(question):
    with st.form(f"edit_{question['id']}"):
        title = st.text_input("Title", value=question.get("title") or "")
        topic = st.text_input("Topic", value=question.get("topic") or "")
        problem_statement = st.text_area("Problem statement", value=question.get("problemStatement") or "")
        solution = st.text_area("Solution", value=question.get("solution") or "")
        submitted = st.form_submit_button("Save")
    if submitted:
        try:
            client().update_question(
                question["id"],
                title=title,
                topic=topic,
                problemStatement=problem_statement,
                solution=solution,
            )
        except ApiError as e:
            st.error(e.message)
        else:
            st.session_state.pop("editing", None)
            st.rerun()


def question_list():
    st.title("Coding questions")
    try:
        questions = client().list_questions()
    except ApiError as e:
        st.error(e.message)
        return
    if not questions:
        st.info("No questions yet.")
        return

    logged_in = "token" in st.session_state
    for question in questions:
        st.subheader(question["title"])
        st.caption(question.get("topic") or "")
        st.write(question.get("problemStatement") or "")
        with st.expander("Show solution"):
            st.code(question.get("solution") or "")

        # server still checks the token; this only hides the controls
        if logged_in:
            col_edit, col_delete = st.columns(2)
            if col_edit.button("Edit", key=f"edit_btn_{question['id']}"):
                st.session_state["editing"] = question["id"]
            if col_delete.button("Delete", key=f"delete_btn_{question['id']}"):
                try:
                    client().delete_question(question["id"])
                except ApiError as e:
                    st.error(e.message)
                else:
                    st.rerun()
            if st.session_state.get("editing") == question["id"]:
                edit_question(question)
        st.divider()


def main():
    if "token" in st.session_state:
        st.sidebar.write(f"Logged in as {st.session_state.get('username')}")
        menu = ["Questions", "Add question"]
        if st.sidebar.button("Log out"):
            logout()
    else:
        menu = ["Questions", "Login", "Register"]

    choice = st.sidebar.selectbox("Menu", menu)

    if choice == "Questions":
        question_list()
    elif choice == "Add question":
        add_question()
    elif choice == "Login":
        login()
    elif choice == "Register":
        register()


if __name__ == '__main__':
    main()
