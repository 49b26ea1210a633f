#!/usr/bin/env python3
"""
Debug tools for checking the assessment API from the command line
"""
import asyncio
import os
import sys

import httpx

# API configuration
BASE_URL = os.getenv("WRITEWISE_API_URL", "http://localhost:8000")


async def health_check():
    """Check the service is up."""
    print("🏥 Health check:")

    async with httpx.AsyncClient() as client:
        try:
            response = await client.get(f"{BASE_URL}/health")
            if response.status_code == 200:
                health = response.json()
                print(f"   Status: {'✅ Healthy' if health['status'] == 'healthy' else '❌ Issues'}")
                print(f"   Scoring profile: {health['scoring_profile']}")
                return health
            else:
                print(f"   ❌ Server error: {response.status_code}")
                return None
        except Exception as e:
            print(f"   ❌ Connection error: {e}")
            return None


async def show_profiles():
    """Show the scoring profiles and their weights."""
    print("⚖️  Scoring profiles:")

    async with httpx.AsyncClient() as client:
        try:
            response = await client.get(f"{BASE_URL}/assessments/profiles")
            if response.status_code == 200:
                data = response.json()
                for profile in data["profiles"]:
                    marker = "👉" if profile["name"] == data["active"] else "  "
                    weights = ", ".join(f"{k}={v}" for k, v in profile["weights"].items())
                    print(f" {marker} {profile['name']}: {weights}")
                return data
            else:
                print(f"   ❌ Server error: {response.status_code}")
                return None
        except Exception as e:
            print(f"   ❌ Connection error: {e}")
            return None


async def assess_text(text: str):
    """Send a text for assessment and print the breakdown."""
    print(f"📝 Assessing {len(text.split())} words...")

    async with httpx.AsyncClient() as client:
        try:
            response = await client.post(f"{BASE_URL}/assessments/writing", json={"text": text})
            if response.status_code == 200:
                assessment = response.json()["assessment"]
                print(f"   🎯 Level: {assessment['cefrLevel']} (score {assessment['score']})")
                print(f"   🔥 Confidence: {assessment['confidenceLevel']}")
                for skill, score in assessment["sublevels"].items():
                    print(f"      {skill}: {score}")
                for error in assessment["errors"]:
                    print(f"   ⚠️  [{error['level']}] {error['description']} (severity {error['severity']})")
                return assessment
            else:
                print(f"   ❌ Rejected ({response.status_code}): {response.json().get('detail')}")
                return None
        except Exception as e:
            print(f"   ❌ Connection error: {e}")
            return None


async def assess_file(path: str):
    """Assess the contents of a text file."""
    with open(path, encoding="utf-8") as f:
        return await assess_text(f.read())


async def show_assignment(course_id: str, lesson_id: str, assignment_id: str):
    """Show the details of one writing assignment."""
    print(f"📚 Assignment {course_id}/{lesson_id}/{assignment_id}:")

    async with httpx.AsyncClient() as client:
        try:
            response = await client.get(f"{BASE_URL}/assignments/{course_id}/{lesson_id}/{assignment_id}")
            if response.status_code == 200:
                assignment = response.json()
                if not assignment["found"]:
                    print("   ℹ️  Not in catalog, showing default")
                print(f"   {assignment['title']}: {assignment['prompt']}")
                if assignment["timeLimit"]:
                    print(f"   ⏰ {assignment['timeLimit']} minutes, ~{assignment['wordCount']} words")
                return assignment
            else:
                print(f"   ❌ Server error: {response.status_code}")
                return None
        except Exception as e:
            print(f"   ❌ Connection error: {e}")
            return None


async def main():
    """Main function with interactive menu."""
    if len(sys.argv) > 1:
        command = sys.argv[1]
        if command == "health":
            await health_check()
        elif command == "profiles":
            await show_profiles()
        elif command == "assess" and len(sys.argv) > 2:
            await assess_file(sys.argv[2])
        elif command == "assignment" and len(sys.argv) > 4:
            await show_assignment(sys.argv[2], sys.argv[3], sys.argv[4])
        else:
            print(f"Unknown command: {command}")
        return

    # Interactive menu
    while True:
        print("\n" + "=" * 50)
        print("🔧 WRITEWISE DEBUG TOOLS")
        print("=" * 50)
        print("1. 🏥 Health check")
        print("2. ⚖️  Show scoring profiles")
        print("3. 📝 Assess a text")
        print("4. 📄 Assess a file")
        print("5. 📚 Show assignment")
        print("0. 🚪 Exit")

        choice = input("\nSelect an option: ").strip()

        if choice == "0":
            print("👋 Goodbye!")
            break
        elif choice == "1":
            await health_check()
        elif choice == "2":
            await show_profiles()
        elif choice == "3":
            text = input("Text: ").strip()
            await assess_text(text)
        elif choice == "4":
            path = input("File path: ").strip()
            await assess_file(path)
        elif choice == "5":
            course_id = input("Course ID (default example-course): ").strip() or "example-course"
            lesson_id = input("Lesson ID (default day-1): ").strip() or "day-1"
            assignment_id = input("Assignment ID (default writing-assignment-1): ").strip() or "writing-assignment-1"
            await show_assignment(course_id, lesson_id, assignment_id)
        else:
            print("❌ Invalid option")


if __name__ == "__main__":
    asyncio.run(main())
